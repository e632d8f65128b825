"""Dutch Tweede Kamer 2023 reference dataset.

Positions are on four axes, each within [-10, 10]:
economic (left -> right), social (conservative -> progressive),
european (eurosceptic -> pro-EU), immigration (restrictive -> open).
Flexibility and experience are on a 0-100 scale.

`expectedSeats` holds the published seat totals; `votes` the tally shipped
alongside them.
"""

DUTCH_2023 = {
    "totalSeats": 150,
    "parties": [
        {
            "id": "PVV",
            "displayName": "Partij voor de Vrijheid",
            "leader": "Geert Wilders",
            "ideologicalVector": [3.0, -8.0, -6.0, -9.0],
            "flexibility": 30.0,
            "experience": 85.0,
            "preferredPartners": ["VVD", "BBB", "NSC"],
            "excludedPartners": ["GL-PvdA", "D66", "DENK", "Volt"],
        },
        {
            "id": "GL-PvdA",
            "displayName": "GroenLinks-PvdA",
            "leader": "Frans Timmermans",
            "ideologicalVector": [-7.0, 8.0, 8.0, 7.0],
            "flexibility": 70.0,
            "experience": 80.0,
            "preferredPartners": ["D66", "Volt", "CU", "PvdD"],
            "excludedPartners": ["PVV", "FvD", "JA21"],
        },
        {
            "id": "VVD",
            "displayName": "Volkspartij voor Vrijheid en Democratie",
            "leader": "Dilan Yeşilgöz-Zegerius",
            "ideologicalVector": [6.0, 3.0, 6.0, -2.0],
            "flexibility": 85.0,
            "experience": 90.0,
            "preferredPartners": ["D66", "CDA", "NSC", "CU"],
            "excludedPartners": ["SP", "FvD"],
        },
        {
            "id": "NSC",
            "displayName": "Nieuw Sociaal Contract",
            "leader": "Pieter Omtzigt",
            "ideologicalVector": [4.0, -1.0, 2.0, -3.0],
            "flexibility": 60.0,
            "experience": 70.0,
            "preferredPartners": ["VVD", "CDA", "CU", "D66"],
            "excludedPartners": ["FvD", "DENK"],
        },
        {
            "id": "D66",
            "displayName": "Democraten 66",
            "leader": "Rob Jetten",
            "ideologicalVector": [2.0, 7.0, 9.0, 5.0],
            "flexibility": 80.0,
            "experience": 75.0,
            "preferredPartners": ["VVD", "GL-PvdA", "Volt", "CU"],
            "excludedPartners": ["PVV", "FvD", "JA21"],
        },
        {
            "id": "BBB",
            "displayName": "BoerBurgerBeweging",
            "leader": "Caroline van der Plas",
            "ideologicalVector": [1.0, -4.0, -3.0, -5.0],
            "flexibility": 45.0,
            "experience": 60.0,
            "preferredPartners": ["PVV", "VVD", "NSC", "CDA"],
            "excludedPartners": ["GL-PvdA", "D66", "PvdD"],
        },
        {
            "id": "CDA",
            "displayName": "Christen-Democratisch Appèl",
            "leader": "Henri Bontenbal",
            "ideologicalVector": [3.0, -3.0, 5.0, -2.0],
            "flexibility": 90.0,
            "experience": 70.0,
            "preferredPartners": ["VVD", "D66", "NSC", "CU"],
            "excludedPartners": ["FvD", "SP"],
        },
        {
            "id": "SP",
            "displayName": "Socialistische Partij",
            "leader": "Lilian Marijnissen",
            "ideologicalVector": [-8.0, 4.0, -4.0, 2.0],
            "flexibility": 40.0,
            "experience": 65.0,
            "preferredPartners": ["GL-PvdA", "PvdD"],
            "excludedPartners": ["VVD", "PVV", "FvD", "JA21"],
        },
        {
            "id": "FvD",
            "displayName": "Forum voor Democratie",
            "leader": "Thierry Baudet",
            "ideologicalVector": [4.0, -7.0, -8.0, -8.0],
            "flexibility": 20.0,
            "experience": 50.0,
            "preferredPartners": ["PVV", "JA21"],
            "excludedPartners": ["GL-PvdA", "D66", "Volt", "DENK", "CU"],
        },
        {
            "id": "PvdD",
            "displayName": "Partij voor de Dieren",
            "leader": "Esther Ouwehand",
            "ideologicalVector": [-3.0, 6.0, 4.0, 4.0],
            "flexibility": 35.0,
            "experience": 55.0,
            "preferredPartners": ["GL-PvdA", "Volt", "SP"],
            "excludedPartners": ["PVV", "FvD", "BBB"],
        },
        {
            "id": "CU",
            "displayName": "ChristenUnie",
            "leader": "Miriam Bikker",
            "ideologicalVector": [-1.0, -5.0, 3.0, 0.0],
            "flexibility": 85.0,
            "experience": 60.0,
            "preferredPartners": ["VVD", "D66", "CDA", "NSC"],
            "excludedPartners": ["FvD", "PVV"],
        },
        {
            "id": "Volt",
            "displayName": "Volt Nederland",
            "leader": "Laurens Dassen",
            "ideologicalVector": [1.0, 8.0, 10.0, 7.0],
            "flexibility": 75.0,
            "experience": 65.0,
            "preferredPartners": ["D66", "GL-PvdA", "VVD"],
            "excludedPartners": ["PVV", "FvD", "JA21"],
        },
        {
            "id": "JA21",
            "displayName": "JA21",
            "leader": "Joost Eerdmans",
            "ideologicalVector": [5.0, -6.0, -4.0, -7.0],
            "flexibility": 50.0,
            "experience": 40.0,
            "preferredPartners": ["PVV", "VVD", "FvD"],
            "excludedPartners": ["GL-PvdA", "D66", "DENK"],
        },
        {
            "id": "SGP",
            "displayName": "Staatkundig Gereformeerde Partij",
            "leader": "Kees van der Staaij",
            "ideologicalVector": [2.0, -9.0, -2.0, -4.0],
            "flexibility": 30.0,
            "experience": 55.0,
            "preferredPartners": ["CU", "CDA"],
            "excludedPartners": ["D66", "GL-PvdA", "PvdD", "DENK"],
        },
        {
            "id": "DENK",
            "displayName": "DENK",
            "leader": "Stephan van Baarle",
            "ideologicalVector": [-4.0, 7.0, 2.0, 9.0],
            "flexibility": 40.0,
            "experience": 60.0,
            "preferredPartners": ["GL-PvdA", "SP"],
            "excludedPartners": ["PVV", "FvD", "JA21"],
        },
    ],
    "votes": {
        "PVV": 2_410_676,
        "GL-PvdA": 2_566_891,
        "VVD": 2_070_134,
        "NSC": 1_269_897,
        "D66": 506_694,
        "BBB": 1_522_204,
        "CDA": 377_565,
        "SP": 383_481,
        "FvD": 218_453,
        "PvdD": 283_048,
        "CU": 270_726,
        "Volt": 265_404,
        "JA21": 126_493,
        "SGP": 253_977,
        "DENK": 294_633,
    },
    "expectedSeats": {
        "PVV": 37,
        "GL-PvdA": 25,
        "VVD": 24,
        "NSC": 20,
        "D66": 9,
        "BBB": 7,
        "CDA": 5,
        "SP": 5,
        "FvD": 3,
        "PvdD": 3,
        "CU": 3,
        "Volt": 3,
        "JA21": 1,
        "SGP": 3,
        "DENK": 3,
    },
    "historical": [
        # Frequent partners
        {"parties": ["VVD", "D66"], "score": 0.8},
        {"parties": ["VVD", "CDA"], "score": 0.7},
        {"parties": ["CDA", "D66"], "score": 0.6},
        {"parties": ["VVD", "CU"], "score": 0.5},
        {"parties": ["CDA", "CU"], "score": 0.9},
        {"parties": ["GL-PvdA", "D66"], "score": 0.6},
        # Recent partners
        {"parties": ["VVD", "NSC"], "score": 0.4},
        {"parties": ["NSC", "CDA"], "score": 0.5},
        {"parties": ["BBB", "VVD"], "score": 0.3},
        # Difficult pairings
        {"parties": ["PVV", "D66"], "score": -0.8},
        {"parties": ["PVV", "GL-PvdA"], "score": -0.9},
        {"parties": ["FvD", "D66"], "score": -0.7},
        {"parties": ["SP", "VVD"], "score": -0.6},
        {"parties": ["PVV", "DENK"], "score": -1.0},
        {"parties": ["FvD", "CU"], "score": -0.8},
        {"parties": ["BBB", "PvdD"], "score": -0.7},
    ],
    "cases": [
        {"label": "Rutte III", "parties": ["VVD", "D66", "CDA", "CU"], "succeeded": True},
        {"label": "Purple", "parties": ["VVD", "GL-PvdA"], "succeeded": True},
        {"label": "Left-right grand", "parties": ["PVV", "GL-PvdA"], "succeeded": False},
        {"label": "Socialist-liberal", "parties": ["SP", "VVD", "D66"], "succeeded": False},
        {"label": "Forum-progressive", "parties": ["FvD", "D66", "CU"], "succeeded": False},
    ],
    "scenarios": [
        {"name": "Current Government", "parties": ["PVV", "VVD", "NSC", "BBB"]},
        {"name": "Purple Coalition", "parties": ["VVD", "GL-PvdA", "D66"]},
        {"name": "Left Coalition", "parties": ["GL-PvdA", "D66", "Volt", "PvdD", "SP"]},
        {"name": "Right Coalition", "parties": ["PVV", "VVD", "FvD", "JA21", "BBB"]},
        {"name": "Center Coalition", "parties": ["VVD", "NSC", "D66", "CDA", "CU"]},
        {"name": "Grand Coalition", "parties": ["PVV", "GL-PvdA", "VVD", "NSC"]},
        {"name": "Minority Government", "parties": ["VVD", "D66", "NSC"]},
    ],
}
