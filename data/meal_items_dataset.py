MEAL_ITEMS_DATA = [
    # Vegetarian
    {"name": "Moong Dal Chilla", "diet_type": "Vegetarian", "calories": 220, "protein": 14, "carbs": 20, "fats": 8, "categories": ["Weight Loss", "Diabetic-Friendly"]},
    {"name": "Quinoa Upma", "diet_type": "Vegetarian", "calories": 250, "protein": 8, "carbs": 35, "fats": 9, "categories": ["Diabetic-Friendly"]},
    {"name": "Vegetable Oats Khichdi", "diet_type": "Vegetarian", "calories": 200, "protein": 7, "carbs": 32, "fats": 6, "categories": ["Weight Loss"]},
    {"name": "Tofu Stir Fry", "diet_type": "Vegetarian", "calories": 380, "protein": 25, "carbs": 40, "fats": 12, "categories": ["High-Protein", "Muscle Gain"]},
    {"name": "Greek Yogurt with Berries", "diet_type": "Vegetarian", "calories": 250, "protein": 18, "carbs": 30, "fats": 8, "categories": ["Weight Loss", "High-Protein"]},
    {"name": "Quinoa Bowl with Vegetables", "diet_type": "Vegetarian", "calories": 420, "protein": 15, "carbs": 60, "fats": 14, "categories": ["Balanced"]},
    # Non-Vegetarian
    {"name": "Grilled Chicken and Vegetables", "diet_type": "Non-Vegetarian", "calories": 350, "protein": 35, "carbs": 30, "fats": 10, "categories": ["Weight Loss", "High-Protein"]},
    {"name": "Salmon and Sweet Potato", "diet_type": "Non-Vegetarian", "calories": 450, "protein": 30, "carbs": 40, "fats": 15, "categories": ["Balanced", "Muscle Gain"]},
    {"name": "Chicken and Broccoli", "diet_type": "Non-Vegetarian", "calories": 380, "protein": 40, "carbs": 20, "fats": 12, "categories": ["High-Protein", "Muscle Gain", "Diabetic-Friendly"]},
]
