MOCK_PROFILES = [
    {
        "name": "Avery",
        "skinType": "Dry",
        "skinTone": "fair cool",
        "allergies": ["lanolin"],
        "dislikedBrands": ["Brand X"],
        "preferredBrands": ["CeraVe"],
        "skinConcerns": ["Dryness", "Fine Lines"],
        "preferredFinish": "dewy",
        "preferredCoverage": "light",
    },
    {
        "name": "Maya",
        "skinType": "oily skin",
        "skinTone": "medium warm",
        "allergies": [],
        "skinConcerns": ["Acne/Breakouts", "Large Pores"],
        "preferredFinish": "matte",
        "preferredCoverage": "full",
    },
    {
        "name": "Sam",
        "skinType": "sensitive",
        "skinTone": "deep neutral",
        "allergies": ["fragrance", "parfum"],
    },
]

MOCK_PRODUCTS = [
    {
        "name": "Hydrating Facial Cleanser",
        "brand": "CeraVe",
        "category": "cleanser",
        "ingredients": [
            "Aqua", "Glycerin", "Ceramides", "Hyaluronic Acid", "Cholesterol", "Phytosphingosine",
        ],
        "skinType": ["dry skin", "normal skin"],
        "price": "$15.99",
    },
    {
        "name": "Fit Me Matte + Poreless Foundation",
        "brand": "Maybelline",
        "category": "Foundation",
        "shade": "128 Warm Nude",
        "coverage": "full coverage",
        "finish": "matte",
        "ingredients": "Ingredients: Aqua, Cyclohexasiloxane, Niacinamide, Kaolin Clay, Salicylic Acid, Fragrance",
        "skinType": ["oily skin", "combination skin"],
    },
    {
        "name": "Soft Glow Body Butter",
        "brand": "Brand X",
        "category": "moisturizer",
        "ingredients": ["Cocoa Butter", "Coconut Oil", "Parfum/Fragrance", "Methylparaben"],
        "skinType": ["all skin types"],
    },
]
