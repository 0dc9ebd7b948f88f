"""Bundled starter catalog: Mediterranean-leaning recipes, no canned fish."""

RECIPES = [
    # ------------------------------------------------------------------
    # Breakfasts
    # ------------------------------------------------------------------
    {
        "id": "b-greek-yogurt-bowl",
        "name": "Greek Yogurt Bowl with Honey and Walnuts",
        "meal_type": "breakfast",
        "cuisine": "greek",
        "protein": "dairy",
        "servings": 2,
        "summary": "Thick yogurt, toasted walnuts, figs and a drizzle of thyme honey.",
        "url": "https://www.themediterraneandish.com/greek-yogurt-bowl/",
        "ingredients": [
            {"item": "Greek yogurt", "quantity": 2, "unit": "cup"},
            {"item": "walnuts", "quantity": 0.5, "unit": "cup"},
            {"item": "honey", "quantity": 2, "unit": "tbsp"},
            {"item": "dried figs", "quantity": 4},
        ],
    },
    {
        "id": "b-shakshuka",
        "name": "Shakshuka",
        "meal_type": "breakfast",
        "cuisine": "north african",
        "protein": "eggs",
        "servings": 4,
        "summary": "Eggs poached in a spiced tomato and pepper sauce.",
        "url": "https://www.themediterraneandish.com/shakshuka-recipe/",
        "ingredients": [
            {"item": "eggs", "quantity": 6},
            {"item": "tomato", "quantity": 4},
            {"item": "red bell pepper", "quantity": 1},
            {"item": "onion", "quantity": 1},
            {"item": "olive oil", "quantity": 2, "unit": "tbsp"},
            {"item": "cumin", "quantity": 1, "unit": "tsp"},
        ],
    },
    {
        "id": "b-pan-con-tomate",
        "name": "Pan con Tomate with Manchego",
        "meal_type": "breakfast",
        "cuisine": "spanish",
        "protein": "dairy",
        "servings": 2,
        "summary": "Grilled bread rubbed with garlic and ripe tomato, topped with manchego.",
        "url": "https://www.spanishsabores.com/pan-con-tomate/",
        "ingredients": [
            {"item": "rustic bread", "quantity": 4, "unit": "slice"},
            {"item": "tomato", "quantity": 2},
            {"item": "garlic", "quantity": 1, "unit": "clove"},
            {"item": "manchego", "quantity": 60, "unit": "g"},
            {"item": "olive oil", "quantity": 1, "unit": "tbsp"},
        ],
    },
    {
        "id": "b-tortilla-espanola",
        "name": "Tortilla Española",
        "meal_type": "breakfast",
        "cuisine": "spanish",
        "protein": "eggs",
        "servings": 4,
        "summary": "Potato and onion omelette, slow-cooked in olive oil.",
        "url": "https://www.spanishsabores.com/spanish-tortilla/",
        "ingredients": [
            {"item": "eggs", "quantity": 6},
            {"item": "potato", "quantity": 500, "unit": "g"},
            {"item": "onion", "quantity": 1},
            {"item": "olive oil", "quantity": 0.5, "unit": "cup"},
            {"item": "salt"},
        ],
    },
    {
        "id": "b-huevos-rancheros",
        "name": "Huevos Rancheros",
        "meal_type": "breakfast",
        "cuisine": "mexican",
        "protein": "eggs",
        "servings": 2,
        "summary": "Fried eggs on warm tortillas with ranchero sauce and black beans.",
        "url": "https://www.mexicoinmykitchen.com/huevos-rancheros/",
        "ingredients": [
            {"item": "eggs", "quantity": 4},
            {"item": "corn tortillas", "quantity": 4},
            {"item": "black beans", "quantity": 1, "unit": "cup"},
            {"item": "tomato", "quantity": 2},
            {"item": "jalapeño", "quantity": 1},
            {"item": "cilantro"},
        ],
    },
    {
        "id": "b-labneh-toast",
        "name": "Labneh Toast with Za'atar",
        "meal_type": "breakfast",
        "cuisine": "levantine",
        "protein": "dairy",
        "servings": 2,
        "summary": "Creamy labneh on toast with za'atar, cucumber and olive oil.",
        "url": "https://www.themediterraneandish.com/labneh/",
        "ingredients": [
            {"item": "labneh", "quantity": 1, "unit": "cup"},
            {"item": "rustic bread", "quantity": 4, "unit": "slice"},
            {"item": "za'atar", "quantity": 1, "unit": "tbsp"},
            {"item": "cucumber", "quantity": 1},
            {"item": "olive oil", "quantity": 1, "unit": "tbsp"},
        ],
    },
    {
        "id": "b-spinach-feta-omelette",
        "name": "Spinach and Feta Omelette",
        "meal_type": "breakfast",
        "cuisine": "greek",
        "protein": "eggs",
        "servings": 2,
        "summary": "Fluffy omelette folded around wilted spinach and crumbled feta.",
        "url": "https://www.themediterraneandish.com/spinach-feta-omelette/",
        "ingredients": [
            {"item": "eggs", "quantity": 4},
            {"item": "spinach", "quantity": 2, "unit": "cup"},
            {"item": "feta", "quantity": 50, "unit": "g"},
            {"item": "olive oil", "quantity": 1, "unit": "tbsp"},
        ],
    },
    {
        "id": "b-overnight-oats-orange",
        "name": "Orange and Almond Overnight Oats",
        "meal_type": "breakfast",
        "cuisine": "italian",
        "protein": "plant",
        "servings": 2,
        "summary": "Oats soaked in milk with orange zest, almonds and a pinch of cinnamon.",
        "url": "https://www.loveandlemons.com/overnight-oats/",
        "ingredients": [
            {"item": "rolled oats", "quantity": 1, "unit": "cup"},
            {"item": "milk", "quantity": 1, "unit": "cup"},
            {"item": "orange", "quantity": 1},
            {"item": "almonds", "quantity": 0.25, "unit": "cup"},
            {"item": "cinnamon"},
        ],
    },
    # ------------------------------------------------------------------
    # Lunches
    # ------------------------------------------------------------------
    {
        "id": "l-greek-salad",
        "name": "Horiatiki (Greek Village Salad)",
        "meal_type": "lunch",
        "cuisine": "greek",
        "protein": "dairy",
        "servings": 2,
        "summary": "Tomato, cucumber, red onion, olives and a slab of feta.",
        "url": "https://www.themediterraneandish.com/traditional-greek-salad-recipe/",
        "ingredients": [
            {"item": "tomato", "quantity": 3},
            {"item": "cucumber", "quantity": 1},
            {"item": "red onion", "quantity": 0.5},
            {"item": "kalamata olives", "quantity": 0.5, "unit": "cup"},
            {"item": "feta", "quantity": 150, "unit": "g"},
            {"item": "olive oil", "quantity": 3, "unit": "tbsp"},
        ],
    },
    {
        "id": "l-lentil-soup",
        "name": "Lemony Red Lentil Soup",
        "meal_type": "lunch",
        "cuisine": "turkish",
        "protein": "legumes",
        "servings": 4,
        "summary": "Red lentils simmered with carrot and cumin, finished with lemon.",
        "url": "https://www.themediterraneandish.com/lentil-soup/",
        "ingredients": [
            {"item": "red lentils", "quantity": 1.5, "unit": "cup"},
            {"item": "carrot", "quantity": 2},
            {"item": "onion", "quantity": 1},
            {"item": "cumin", "quantity": 1, "unit": "tsp"},
            {"item": "lemon", "quantity": 1},
        ],
    },
    {
        "id": "l-gazpacho",
        "name": "Andalusian Gazpacho",
        "meal_type": "lunch",
        "cuisine": "spanish",
        "protein": "plant",
        "servings": 4,
        "summary": "Chilled blended tomato soup with cucumber, pepper and sherry vinegar.",
        "url": "https://www.spanishsabores.com/gazpacho/",
        "ingredients": [
            {"item": "tomato", "quantity": 6},
            {"item": "cucumber", "quantity": 1},
            {"item": "green bell pepper", "quantity": 1},
            {"item": "garlic", "quantity": 1, "unit": "clove"},
            {"item": "sherry vinegar", "quantity": 2, "unit": "tbsp"},
            {"item": "olive oil", "quantity": 0.25, "unit": "cup"},
        ],
    },
    {
        "id": "l-chicken-tinga-tostadas",
        "name": "Chicken Tinga Tostadas",
        "meal_type": "lunch",
        "cuisine": "mexican",
        "protein": "chicken",
        "servings": 4,
        "summary": "Shredded chicken in chipotle tomato sauce on crisp tostadas.",
        "url": "https://www.mexicoinmykitchen.com/chicken-tinga/",
        "ingredients": [
            {"item": "chicken breast", "quantity": 500, "unit": "g"},
            {"item": "chipotle in adobo", "quantity": 2},
            {"item": "tomato", "quantity": 3},
            {"item": "onion", "quantity": 1},
            {"item": "tostadas", "quantity": 8},
            {"item": "avocado", "quantity": 1},
        ],
    },
    {
        "id": "l-falafel-wrap",
        "name": "Baked Falafel Wraps",
        "meal_type": "lunch",
        "cuisine": "levantine",
        "protein": "legumes",
        "servings": 4,
        "summary": "Herby chickpea falafel with tahini sauce in warm flatbread.",
        "url": "https://www.themediterraneandish.com/how-to-make-falafel/",
        "ingredients": [
            {"item": "dried chickpeas", "quantity": 1, "unit": "cup"},
            {"item": "parsley", "quantity": 1, "unit": "bunch"},
            {"item": "tahini", "quantity": 0.25, "unit": "cup"},
            {"item": "flatbread", "quantity": 4},
            {"item": "cucumber", "quantity": 1},
        ],
    },
    {
        "id": "l-tuna-white-bean-salad",
        "name": "Seared Tuna and White Bean Salad",
        "meal_type": "lunch",
        "cuisine": "italian",
        "protein": "fish",
        "servings": 2,
        "summary": "Fresh seared tuna over cannellini beans, arugula and lemon.",
        "url": "https://www.loveandlemons.com/white-bean-salad/",
        "ingredients": [
            {"item": "tuna steak", "quantity": 300, "unit": "g"},
            {"item": "cannellini beans", "quantity": 1.5, "unit": "cup"},
            {"item": "arugula", "quantity": 2, "unit": "cup"},
            {"item": "lemon", "quantity": 1},
            {"item": "olive oil", "quantity": 2, "unit": "tbsp"},
        ],
    },
    {
        "id": "l-beef-kofta-pita",
        "name": "Beef Kofta Pitas",
        "meal_type": "lunch",
        "cuisine": "levantine",
        "protein": "beef",
        "servings": 4,
        "summary": "Spiced ground beef skewers tucked into pita with yogurt sauce.",
        "url": "https://www.themediterraneandish.com/kofta-kebab/",
        "ingredients": [
            {"item": "ground beef", "quantity": 500, "unit": "g"},
            {"item": "onion", "quantity": 1},
            {"item": "parsley", "quantity": 0.5, "unit": "bunch"},
            {"item": "pita", "quantity": 4},
            {"item": "Greek yogurt", "quantity": 0.5, "unit": "cup"},
        ],
    },
    {
        "id": "l-black-bean-quesadillas",
        "name": "Black Bean and Corn Quesadillas",
        "meal_type": "lunch",
        "cuisine": "mexican",
        "protein": "legumes",
        "servings": 2,
        "summary": "Crisp tortillas filled with black beans, corn and melted cheese.",
        "url": "https://www.loveandlemons.com/quesadilla/",
        "ingredients": [
            {"item": "flour tortillas", "quantity": 4},
            {"item": "black beans", "quantity": 1, "unit": "cup"},
            {"item": "corn", "quantity": 1, "unit": "cup"},
            {"item": "Monterey Jack", "quantity": 100, "unit": "g"},
            {"item": "salsa"},
        ],
    },
    # ------------------------------------------------------------------
    # Dinners
    # ------------------------------------------------------------------
    {
        "id": "d-paella-mixta",
        "name": "Paella Mixta",
        "meal_type": "dinner",
        "cuisine": "spanish",
        "protein": "seafood",
        "servings": 4,
        "summary": "Saffron rice with chicken, shrimp, mussels and peas.",
        "url": "https://www.spanishsabores.com/paella/",
        "ingredients": [
            {"item": "bomba rice", "quantity": 2, "unit": "cup"},
            {"item": "chicken thighs", "quantity": 400, "unit": "g"},
            {"item": "shrimp", "quantity": 250, "unit": "g"},
            {"item": "mussels", "quantity": 500, "unit": "g"},
            {"item": "saffron"},
            {"item": "peas", "quantity": 1, "unit": "cup"},
        ],
    },
    {
        "id": "d-chicken-souvlaki",
        "name": "Chicken Souvlaki with Tzatziki",
        "meal_type": "dinner",
        "cuisine": "greek",
        "protein": "chicken",
        "servings": 4,
        "summary": "Lemon-oregano chicken skewers with garlicky tzatziki.",
        "url": "https://www.themediterraneandish.com/chicken-souvlaki-recipe/",
        "ingredients": [
            {"item": "chicken thighs", "quantity": 700, "unit": "g"},
            {"item": "lemon", "quantity": 2},
            {"item": "oregano", "quantity": 1, "unit": "tbsp"},
            {"item": "Greek yogurt", "quantity": 1, "unit": "cup"},
            {"item": "cucumber", "quantity": 1},
            {"item": "garlic", "quantity": 2, "unit": "clove"},
        ],
    },
    {
        "id": "d-baked-salmon-herbs",
        "name": "Baked Salmon with Herbs and Lemon",
        "meal_type": "dinner",
        "cuisine": "greek",
        "protein": "fish",
        "servings": 4,
        "summary": "Salmon fillets baked with garlic, dill and lemon slices.",
        "url": "https://www.themediterraneandish.com/baked-salmon/",
        "ingredients": [
            {"item": "salmon fillet", "quantity": 700, "unit": "g"},
            {"item": "lemon", "quantity": 1},
            {"item": "dill", "quantity": 1, "unit": "bunch"},
            {"item": "garlic", "quantity": 3, "unit": "clove"},
            {"item": "olive oil", "quantity": 2, "unit": "tbsp"},
        ],
    },
    {
        "id": "d-carne-asada",
        "name": "Carne Asada Tacos",
        "meal_type": "dinner",
        "cuisine": "mexican",
        "protein": "beef",
        "servings": 4,
        "summary": "Citrus-marinated grilled flank steak on corn tortillas with salsa verde.",
        "url": "https://www.mexicoinmykitchen.com/carne-asada/",
        "ingredients": [
            {"item": "flank steak", "quantity": 700, "unit": "g"},
            {"item": "lime", "quantity": 3},
            {"item": "orange", "quantity": 1},
            {"item": "corn tortillas", "quantity": 12},
            {"item": "cilantro", "quantity": 1, "unit": "bunch"},
            {"item": "salsa verde"},
        ],
    },
    {
        "id": "d-beef-stifado",
        "name": "Beef Stifado",
        "meal_type": "dinner",
        "cuisine": "greek",
        "protein": "beef",
        "servings": 6,
        "summary": "Slow-braised beef with pearl onions, red wine and cinnamon.",
        "url": "https://www.themediterraneandish.com/stifado/",
        "ingredients": [
            {"item": "beef chuck", "quantity": 1, "unit": "kg"},
            {"item": "pearl onions", "quantity": 500, "unit": "g"},
            {"item": "red wine", "quantity": 1, "unit": "cup"},
            {"item": "tomato paste", "quantity": 2, "unit": "tbsp"},
            {"item": "cinnamon"},
        ],
    },
    {
        "id": "d-shrimp-saganaki",
        "name": "Shrimp Saganaki",
        "meal_type": "dinner",
        "cuisine": "greek",
        "protein": "seafood",
        "servings": 4,
        "summary": "Shrimp baked in tomato sauce with feta and ouzo.",
        "url": "https://www.themediterraneandish.com/shrimp-saganaki/",
        "ingredients": [
            {"item": "shrimp", "quantity": 500, "unit": "g"},
            {"item": "tomato", "quantity": 4},
            {"item": "feta", "quantity": 100, "unit": "g"},
            {"item": "garlic", "quantity": 2, "unit": "clove"},
            {"item": "olive oil", "quantity": 2, "unit": "tbsp"},
        ],
    },
    {
        "id": "d-chicken-pozole-verde",
        "name": "Chicken Pozole Verde",
        "meal_type": "dinner",
        "cuisine": "mexican",
        "protein": "chicken",
        "servings": 6,
        "summary": "Hominy and chicken stew in a tomatillo and pepita broth.",
        "url": "https://www.mexicoinmykitchen.com/pozole-verde/",
        "ingredients": [
            {"item": "chicken thighs", "quantity": 800, "unit": "g"},
            {"item": "hominy", "quantity": 4, "unit": "cup"},
            {"item": "tomatillos", "quantity": 500, "unit": "g"},
            {"item": "pepitas", "quantity": 0.5, "unit": "cup"},
            {"item": "radishes"},
        ],
    },
    {
        "id": "d-pasta-e-ceci",
        "name": "Pasta e Ceci",
        "meal_type": "dinner",
        "cuisine": "italian",
        "protein": "legumes",
        "servings": 4,
        "summary": "Brothy Roman pasta with chickpeas, rosemary and parmesan.",
        "url": "https://www.loveandlemons.com/pasta-e-ceci/",
        "ingredients": [
            {"item": "ditalini", "quantity": 250, "unit": "g"},
            {"item": "chickpeas", "quantity": 2, "unit": "cup"},
            {"item": "rosemary", "quantity": 1, "unit": "sprig"},
            {"item": "parmesan", "quantity": 50, "unit": "g"},
            {"item": "garlic", "quantity": 2, "unit": "clove"},
        ],
    },
    {
        "id": "d-moroccan-chicken-tagine",
        "name": "Chicken Tagine with Olives and Preserved Lemon",
        "meal_type": "dinner",
        "cuisine": "north african",
        "protein": "chicken",
        "servings": 4,
        "summary": "Braised chicken with ginger, saffron, green olives and preserved lemon.",
        "url": "https://www.themediterraneandish.com/chicken-tagine/",
        "ingredients": [
            {"item": "chicken thighs", "quantity": 900, "unit": "g"},
            {"item": "green olives", "quantity": 0.5, "unit": "cup"},
            {"item": "preserved lemon", "quantity": 1},
            {"item": "onion", "quantity": 2},
            {"item": "saffron"},
        ],
    },
    {
        "id": "d-stuffed-peppers",
        "name": "Rice and Herb Stuffed Peppers (Gemista)",
        "meal_type": "dinner",
        "cuisine": "greek",
        "protein": "plant",
        "servings": 4,
        "summary": "Bell peppers and tomatoes stuffed with herbed rice and baked.",
        "url": "https://www.themediterraneandish.com/gemista/",
        "ingredients": [
            {"item": "red bell pepper", "quantity": 4},
            {"item": "tomato", "quantity": 4},
            {"item": "long-grain rice", "quantity": 1, "unit": "cup"},
            {"item": "mint", "quantity": 0.5, "unit": "bunch"},
            {"item": "olive oil", "quantity": 0.25, "unit": "cup"},
        ],
    },
    {
        "id": "d-pollo-al-ajillo",
        "name": "Pollo al Ajillo",
        "meal_type": "dinner",
        "cuisine": "spanish",
        "protein": "chicken",
        "servings": 4,
        "summary": "Garlic chicken braised with white wine and bay leaf.",
        "url": "https://www.spanishsabores.com/pollo-al-ajillo/",
        "ingredients": [
            {"item": "chicken thighs", "quantity": 800, "unit": "g"},
            {"item": "garlic", "quantity": 10, "unit": "clove"},
            {"item": "dry white wine", "quantity": 0.5, "unit": "cup"},
            {"item": "bay leaf", "quantity": 2},
            {"item": "olive oil", "quantity": 3, "unit": "tbsp"},
        ],
    },
]
