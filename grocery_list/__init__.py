"""grocery-list: a grocery catalog, its recipes, and shopping lists."""
