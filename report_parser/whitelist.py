"""
Heading whitelists for account data-request reports.

Only sections and subsections listed here are extracted. The short codes
are metadata for downstream consumers; matching always uses the full
heading text.
"""

SECTION_CODES: dict[str, str] = {
    "Call of Duty: Black Ops 6": "BO6",
    "Call of Duty: Black Ops Cold War": "BOCW",
    "Activision Account Shared": "AAS",
    "Call of Duty: Modern Warfare": "MW",
    "Call of Duty: Modern Warfare II": "MW2",
    "Call of Duty: Modern Warfare III": "MW3",
    "Call of Duty: Vanguard": "VG",
    "Call of Duty: Warzone 2.0": "WZ2",
    "Call of Duty: Warzone Mobile": "WZM",
}

SUBSECTION_CODES: dict[str, str] = {
    "Campaign Checkpoint Data (reverse chronological)": "CCD",
    "Multiplayer Match Data (reverse chronological)": "MPD",
    "PromoCodes": "PC",
    "Zombies Match Data (reverse chronological)": "ZMD",
    "Campaign Data (reverse chronological)": "CD",
    "Sessions Data (reverse chronological)": "SD",
    "Zombies Data (reverse chronological)": "ZD",
    "Gamertag Data (reverse chronological)": "GD",
    "CoOp Match Data (reverse chronological)": "CMD",
    "Mobile Hardware Data (reverse chronological)": "MHD",
}

SECTION_WHITELIST: frozenset[str] = frozenset(SECTION_CODES)
SUBSECTION_WHITELIST: frozenset[str] = frozenset(SUBSECTION_CODES)
