FOOD_ITEMS_DATA = [
    # Proteins
    {"name": "Chicken Breast", "calories": 165, "protein": 31, "carbs": 0, "fats": 3.6, "serving_size": 100, "serving_unit": "g", "category": "Protein", "is_vegetarian": False},
    {"name": "Salmon", "calories": 208, "protein": 20, "carbs": 0, "fats": 13, "serving_size": 100, "serving_unit": "g", "category": "Protein", "is_vegetarian": False},
    {"name": "Tofu", "calories": 76, "protein": 8, "carbs": 1.9, "fats": 4.8, "serving_size": 100, "serving_unit": "g", "category": "Protein", "is_vegetarian": True},
    {"name": "Eggs", "calories": 78, "protein": 6.3, "carbs": 0.6, "fats": 5.3, "serving_size": 50, "serving_unit": "g", "category": "Protein", "is_vegetarian": True},
    # Carbohydrates
    {"name": "Brown Rice", "calories": 112, "protein": 2.6, "carbs": 23.5, "fats": 0.9, "serving_size": 100, "serving_unit": "g", "category": "Carbohydrates", "is_vegetarian": True},
    {"name": "Sweet Potato", "calories": 86, "protein": 1.6, "carbs": 20.1, "fats": 0.1, "serving_size": 100, "serving_unit": "g", "category": "Carbohydrates", "is_vegetarian": True},
    {"name": "Quinoa", "calories": 120, "protein": 4.4, "carbs": 21.3, "fats": 1.9, "serving_size": 100, "serving_unit": "g", "category": "Carbohydrates", "is_vegetarian": True},
    {"name": "Oatmeal", "calories": 68, "protein": 2.4, "carbs": 12, "fats": 1.4, "serving_size": 100, "serving_unit": "g", "category": "Carbohydrates", "is_vegetarian": True},
    # Fruits
    {"name": "Banana", "calories": 89, "protein": 1.1, "carbs": 22.8, "fats": 0.3, "serving_size": 100, "serving_unit": "g", "category": "Fruits", "is_vegetarian": True},
    {"name": "Apple", "calories": 52, "protein": 0.3, "carbs": 13.8, "fats": 0.2, "serving_size": 100, "serving_unit": "g", "category": "Fruits", "is_vegetarian": True},
    # Vegetables
    {"name": "Broccoli", "calories": 34, "protein": 2.8, "carbs": 6.6, "fats": 0.4, "serving_size": 100, "serving_unit": "g", "category": "Vegetables", "is_vegetarian": True},
    {"name": "Spinach", "calories": 23, "protein": 2.9, "carbs": 3.6, "fats": 0.4, "serving_size": 100, "serving_unit": "g", "category": "Vegetables", "is_vegetarian": True},
    # Dairy
    {"name": "Greek Yogurt", "calories": 59, "protein": 10, "carbs": 3.6, "fats": 0.4, "serving_size": 100, "serving_unit": "g", "category": "Dairy", "is_vegetarian": True},
    {"name": "Cottage Cheese", "calories": 98, "protein": 11.1, "carbs": 3.4, "fats": 4.3, "serving_size": 100, "serving_unit": "g", "category": "Dairy", "is_vegetarian": True},
    # Fats
    {"name": "Avocado", "calories": 160, "protein": 2, "carbs": 8.5, "fats": 14.7, "serving_size": 100, "serving_unit": "g", "category": "Fats", "is_vegetarian": True},
    {"name": "Olive Oil", "calories": 884, "protein": 0, "carbs": 0, "fats": 100, "serving_size": 100, "serving_unit": "g", "category": "Fats", "is_vegetarian": True},
]
