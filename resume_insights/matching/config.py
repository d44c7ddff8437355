"""
Configuration for coursework matching and course categorization.
Adjust prefixes, exclusions and category tables here.
"""

# Minimum similarity (0-100) for a catalog course to count as a match
DEFAULT_MATCH_THRESHOLD = 60

# Similarity scoring parameters
SIMILARITY = {
    "exact": 100,
    "contains": 90,
    "word_bonus": 20,
    "max": 100,
}

# UF course prefixes scanned for CS and related technical courses
UF_CS_PREFIXES = [
    # Computer Science & Engineering
    "COP",  # Computer Programming
    "CDA",  # Computer Design & Architecture
    "CAP",  # Computer Applications
    "COT",  # Computing Theory
    "CIS",  # Computer Information Science
    "CNT",  # Computer Networking
    "CEN",  # Computer Engineering
    # Electrical & Computer Engineering
    "EEL",  # Electrical Engineering
    "EEE",  # Electrical Engineering Electives
    # Mathematics & Statistics
    "STA",  # Statistics
    "MAS",  # Applied & Computational Mathematics
    "MAA",  # Analysis
    "MAD",  # Discrete Mathematics
    "MAP",  # Applied Mathematics
    "MHF",  # Math Foundations
    "MTG",  # Topology & Geometry
]

# Undergraduate course number window kept from the catalog
UNDERGRADUATE_RANGE = (3000, 4999)

# Catalog codes dropped before matching (exact codes and code fragments)
CATALOG_EXCLUDED_CODES = ["COP2271", "COP2271L"]
CATALOG_EXCLUDED_PATTERNS = [r"CIS4930", r"EEL4930"]

EXCLUDED = "EXCLUDED"

CATEGORY_LABELS = [
    "AI & Machine Learning",
    "Security & Privacy",
    "Graphics & Media",
    "Software Engineering",
    "Data & Databases",
    "Systems & Hardware",
    "Core CS",
    "Theory & Math",
    EXCLUDED,
]

# Statistics prefix guarded out of keyword-driven categories
STATS_PREFIX = "STA"

# Ordered category rules, first match wins. Fields:
#   codes            exact (upper-cased) course codes
#   prefixes         code prefixes
#   code_fragments   substrings of the code
#   name_keywords    substrings of the lower-cased course name
#   prefix_keywords  {prefix: [keywords]} pairs that must both hold
#   excluded_codes / excluded_prefixes  guards that veto the rule
CATEGORY_RULES = [
    {
        "label": EXCLUDED,
        "codes": ["EEL3834", "CIS4715", "CIS4905", "CIS4914", "CIS4940"],
        "name_keywords": [
            "independent study",
            "individual study",
            "teaching",
            "learning assistant",
            "senior project",
            "practical work",
            "internship",
            "overseas study",
            "study abroad",
        ],
        "code_fragments": ["4930"],  # generic special topics
    },
    {
        "label": "AI & Machine Learning",
        "name_keywords": [
            "machine learning",
            "artificial intelligence",
            "deep learning",
            "neural network",
            "natural language",
            "nlp",
            "computer vision",
            "intelligent system",
            "data mining",
            "pattern recognition",
        ],
        "codes": ["EEL4773", "CAP4641", "CAP4630"],
        "prefix_keywords": {
            STATS_PREFIX: [
                "machine learning",
                "statistical learning",
                "data mining",
                "multivariate",
                "time series",
            ],
        },
    },
    {
        "label": "Security & Privacy",
        "excluded_prefixes": [STATS_PREFIX],
        "name_keywords": [
            "security",
            "cryptography",
            "crypto",
            "privacy",
            "secure",
            "malware",
            "reverse engineering",
        ],
        "codes": ["CIS4362", "CIS4204"],
    },
    {
        "label": "Graphics & Media",
        "name_keywords": [
            "graphics",
            "game",
            "visualization",
            "rendering",
            "animation",
            "ui",
            "ux",
            "user interface",
            "human-computer",
            "multimedia",
        ],
        "codes": ["CAP4720", "CAP4053"],
    },
    {
        "label": "Software Engineering",
        "excluded_prefixes": [STATS_PREFIX],
        "name_keywords": [
            "software engineering",
            "software development",
            "agile",
            "devops",
            "web application",
            "mobile",
            "android",
            "ios",
        ],
        "codes": ["CEN3031", "CEN4010"],
    },
    {
        "label": "Data & Databases",
        "name_keywords": [
            "database",
            "data science",
            "big data",
            "data warehouse",
            "cloud computing",
            "distributed system",
        ],
        "codes": ["COP4710", "CIS4301", "COT4500"],
    },
    {
        "label": "Systems & Hardware",
        "codes": ["EEL4732", "CDA3101", "COP4600", "CNT4007"],
        "prefixes": ["CDA", "EEL", "EEE"],
        "name_keywords": [
            "operating system",
            "computer organization",
            "computer architecture",
            "network",
            "embedded",
            "hardware",
            "digital",
            "microprocessor",
            "parallel",
            "concurrent",
        ],
    },
    {
        "label": "Core CS",
        "excluded_codes": ["EEL3832", "EEL4732"],
        "excluded_prefixes": [STATS_PREFIX],
        "name_keywords": [
            "data structure",
            "algorithm",
            "programming",
            "object-oriented",
            "software development",
            "compiler",
            "programming language",
        ],
        "codes": ["COP3530", "COP3503", "COP3504", "COT3100", "COP4020"],
    },
    {
        "label": "Theory & Math",
        "prefixes": ["COT", STATS_PREFIX, "MAS", "MAA", "MAD", "MAP", "MHF", "MTG"],
        "name_keywords": [
            "theory",
            "discrete math",
            "linear algebra",
            "probability",
            "statistics",
            "calculus",
            "differential equation",
            "mathematical",
            "numerical",
        ],
        "codes": ["COT4210"],
    },
    {
        # Remaining general CS courses
        "label": "Core CS",
        "prefixes": ["COP", "CAP", "CIS"],
    },
]

# Label for anything no rule claims
FALLBACK_CATEGORY = "Theory & Math"
