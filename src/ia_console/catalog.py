"""
Static offense catalog loaded by dao.offense_dao.seed_once.
CATALOG_VERSION only names the seed marker: once the offenses table has rows,
a new version records a marker and leaves existing entries untouched.
"""

CATALOG_VERSION = "2024.1"

_CATEGORY_0 = "Category 0 - Logged Warnings"
_CATEGORY_1 = "Category 1 - Minor Offenses"
_CATEGORY_2 = "Category 2 - Moderate Offenses"
_CATEGORY_3 = "Category 3 - Major Offenses"
_CATEGORY_4 = "Category 4 - Severe Offenses"

OFFENSE_CATALOG: list[dict] = [
    # ── Category 0 ────────────────────────────────────────────────────────────
    {"code": "0.1", "description": "No VC picture in patrol log", "punishment": "Logged warning", "category": _CATEGORY_0},
    {"code": "0.2", "description": "Incorrect patrol log format", "punishment": "Logged warning", "category": _CATEGORY_0},
    {"code": "0.3", "description": "Improper radio etiquette", "punishment": "Logged warning", "category": _CATEGORY_0},
    {"code": "0.4", "description": "Missing callsign in nickname", "punishment": "Logged warning", "category": _CATEGORY_0},
    {"code": "0.5", "description": "Failure to sign off duty", "punishment": "Logged warning", "category": _CATEGORY_0},
    # ── Category 1 ────────────────────────────────────────────────────────────
    {"code": "1.1", "description": "Incorrect uniform while on duty", "punishment": "Strike 1", "category": _CATEGORY_1},
    {"code": "1.2", "description": "Unauthorized vehicle usage", "punishment": "Strike 1", "category": _CATEGORY_1},
    {"code": "1.3", "description": "Minor disrespect towards a member of the public", "punishment": "Strike 1", "category": _CATEGORY_1},
    {"code": "1.4", "description": "Failure to follow a direct order from a supervisor", "punishment": "Strike 1", "category": _CATEGORY_1},
    {"code": "1.5", "description": "Repeated Category 0 offenses", "punishment": "Strike 1", "category": _CATEGORY_1},
    # ── Category 2 ────────────────────────────────────────────────────────────
    {"code": "2.1", "description": "Trolling while on duty", "punishment": "Strike 2", "category": _CATEGORY_2},
    {"code": "2.2", "description": "Failure to roleplay an arrest", "punishment": "Strike 2", "category": _CATEGORY_2},
    {"code": "2.3", "description": "Random deathmatch (RDM)", "punishment": "Strike 2", "category": _CATEGORY_2},
    {"code": "2.4", "description": "Vehicle deathmatch (VDM)", "punishment": "Strike 2", "category": _CATEGORY_2},
    {"code": "2.5", "description": "Abuse of department equipment", "punishment": "Strike 2", "category": _CATEGORY_2},
    # ── Category 3 ────────────────────────────────────────────────────────────
    {"code": "3.1", "description": "Abuse of power", "punishment": "Suspension (7 days)", "category": _CATEGORY_3},
    {"code": "3.2", "description": "Falsifying patrol logs or reports", "punishment": "Suspension (7 days)", "category": _CATEGORY_3},
    {"code": "3.3", "description": "Harassment of another member", "punishment": "Suspension (14 days)", "category": _CATEGORY_3},
    {"code": "3.4", "description": "Leaking internal department information", "punishment": "Suspension (14 days)", "category": _CATEGORY_3},
    # ── Category 4 ────────────────────────────────────────────────────────────
    {"code": "4.1", "description": "Corruption or collusion with criminal roleplayers", "punishment": "Termination", "category": _CATEGORY_4},
    {"code": "4.2", "description": "Impersonating a high-ranking member", "punishment": "Termination", "category": _CATEGORY_4},
    {"code": "4.3", "description": "Exploiting or cheating", "punishment": "Termination and blacklist", "category": _CATEGORY_4},
    {"code": "4.4", "description": "Discrimination or hate speech", "punishment": "Termination and blacklist", "category": _CATEGORY_4},
]
