SAMPLE_REQUEST = {
    "expenses": {
        "housing": 3000,
        "food": 2000,
        "consumables": 1000,
        "medical": 500,
        "transport": 500,
        "hobbies": 1000,
    },
    "period": "monthly",
    "annual_income": 200000,
    "return_rate": 4,
    "withdrawal_rate": 4,
    "custom_goal": 5000000,
}

SAMPLE_SCENARIO_REQUEST = {
    **SAMPLE_REQUEST,
    "custom_scenarios": [
        {"name": "side_income", "income_factor": 1.25, "expense_factor": 1.0},
    ],
}
