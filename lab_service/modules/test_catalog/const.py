# mapping: {test_id → {displayName, fields: [{name, unit?, refText? | refLow?, refHigh?}]}}
TEST_DEFINITIONS: dict[str, dict] = {
    "CBC": {
        "displayName": "Complete Blood Count (CBC)",
        "fields": [
            {"name": "Hemoglobin",  "unit": "g/dL",       "refLow": 12,  "refHigh": 16},
            {"name": "RBC",         "unit": "Million/µL", "refLow": 4.0, "refHigh": 5.5},
            {"name": "WBC",         "unit": "×10^3/µL",   "refLow": 4.0, "refHigh": 11.0},
            {"name": "Platelets",   "unit": "×10^3/µL",   "refLow": 150, "refHigh": 450},
        ],
    },
    "Liver Function Test": {
        "displayName": "Liver Function Test (LFT)",
        "fields": [
            {"name": "ALT (SGPT)",           "unit": "U/L",   "refLow": 7,   "refHigh": 56},
            {"name": "AST (SGOT)",           "unit": "U/L",   "refLow": 10,  "refHigh": 40},
            {"name": "Alkaline Phosphatase", "unit": "U/L",   "refLow": 44,  "refHigh": 147},
            {"name": "Bilirubin Total",      "unit": "mg/dL", "refLow": 0.1, "refHigh": 1.2},
        ],
    },
    "Thyroid Panel": {
        "displayName": "Thyroid Panel",
        "fields": [
            {"name": "TSH",     "unit": "µIU/mL", "refLow": 0.4, "refHigh": 4.0},
            {"name": "Free T3", "unit": "pg/mL",  "refLow": 2.3, "refHigh": 4.2},
            {"name": "Free T4", "unit": "ng/dL",  "refLow": 0.9, "refHigh": 1.7},
        ],
    },
    "Blood Glucose": {
        "displayName": "Blood Glucose",
        "fields": [
            {"name": "Fasting Glucose", "unit": "mg/dL", "refLow": 70, "refHigh": 100},
            {"name": "Random Glucose",  "unit": "mg/dL", "refLow": 70, "refHigh": 140},
        ],
    },
    "Urinalysis": {
        "displayName": "Urinalysis",
        "fields": [
            {"name": "Appearance", "refText": "Clear"},
            {"name": "pH",         "unit": "",  "refLow": 5, "refHigh": 8},
            {"name": "Protein",    "refText": "Negative"},
            {"name": "Glucose",    "refText": "Negative"},
        ],
    },
}
