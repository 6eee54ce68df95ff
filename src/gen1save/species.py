"""
Gen 1 Save - Species Module
Internal species index -> name, and National Dex <-> internal index.

Gen 1 stores species by internal index (Rhydon = 0x01), not by
National Dex number. Indices above 0xBE are glitch values.
"""

INVALID_NAME = "INVALID"

# Highest internal index with a table entry
MAX_INTERNAL_SPECIES = 0xBE

# Internal index -> name. MISSINGNO marks unused slots inside the range.
SPECIES_NAMES = (
    "INVALID",  # 0x00
    "RHYDON",  # 0x01
    "KANGASKHAN",  # 0x02
    "NIDORAN_M",  # 0x03
    "CLEFAIRY",  # 0x04
    "SPEAROW",  # 0x05
    "VOLTORB",  # 0x06
    "NIDOKING",  # 0x07
    "SLOWBRO",  # 0x08
    "IVYSAUR",  # 0x09
    "EXEGGUTOR",  # 0x0A
    "LICKITUNG",  # 0x0B
    "EXEGGCUTE",  # 0x0C
    "GRIMER",  # 0x0D
    "GENGAR",  # 0x0E
    "NIDORAN_F",  # 0x0F
    "NIDOQUEEN",  # 0x10
    "CUBONE",  # 0x11
    "RHYHORN",  # 0x12
    "LAPRAS",  # 0x13
    "ARCANINE",  # 0x14
    "MEW",  # 0x15
    "GYARADOS",  # 0x16
    "SHELLDER",  # 0x17
    "TENTACOOL",  # 0x18
    "GASTLY",  # 0x19
    "SCYTHER",  # 0x1A
    "STARYU",  # 0x1B
    "BLASTOISE",  # 0x1C
    "PINSIR",  # 0x1D
    "TANGELA",  # 0x1E
    "MISSINGNO",  # 0x1F
    "MISSINGNO",  # 0x20
    "GROWLITHE",  # 0x21
    "ONIX",  # 0x22
    "FEAROW",  # 0x23
    "PIDGEY",  # 0x24
    "SLOWPOKE",  # 0x25
    "KADABRA",  # 0x26
    "GRAVELER",  # 0x27
    "CHANSEY",  # 0x28
    "MACHOKE",  # 0x29
    "MR_MIME",  # 0x2A
    "HITMONLEE",  # 0x2B
    "HITMONCHAN",  # 0x2C
    "ARBOK",  # 0x2D
    "PARASECT",  # 0x2E
    "PSYDUCK",  # 0x2F
    "DROWZEE",  # 0x30
    "GOLEM",  # 0x31
    "MISSINGNO",  # 0x32
    "MAGMAR",  # 0x33
    "MISSINGNO",  # 0x34
    "ELECTABUZZ",  # 0x35
    "MAGNETON",  # 0x36
    "KOFFING",  # 0x37
    "MISSINGNO",  # 0x38
    "MANKEY",  # 0x39
    "SEEL",  # 0x3A
    "DIGLETT",  # 0x3B
    "TAUROS",  # 0x3C
    "MISSINGNO",  # 0x3D
    "MISSINGNO",  # 0x3E
    "MISSINGNO",  # 0x3F
    "FARFETCHD",  # 0x40
    "VENONAT",  # 0x41
    "DRAGONITE",  # 0x42
    "MISSINGNO",  # 0x43
    "MISSINGNO",  # 0x44
    "MISSINGNO",  # 0x45
    "DODUO",  # 0x46
    "POLIWAG",  # 0x47
    "JYNX",  # 0x48
    "MOLTRES",  # 0x49
    "ARTICUNO",  # 0x4A
    "ZAPDOS",  # 0x4B
    "DITTO",  # 0x4C
    "MEOWTH",  # 0x4D
    "KRABBY",  # 0x4E
    "MISSINGNO",  # 0x4F
    "MISSINGNO",  # 0x50
    "MISSINGNO",  # 0x51
    "VULPIX",  # 0x52
    "NINETALES",  # 0x53
    "PIKACHU",  # 0x54
    "RAICHU",  # 0x55
    "MISSINGNO",  # 0x56
    "MISSINGNO",  # 0x57
    "DRATINI",  # 0x58
    "DRAGONAIR",  # 0x59
    "KABUTO",  # 0x5A
    "KABUTOPS",  # 0x5B
    "HORSEA",  # 0x5C
    "SEADRA",  # 0x5D
    "MISSINGNO",  # 0x5E
    "MISSINGNO",  # 0x5F
    "SANDSHREW",  # 0x60
    "SANDSLASH",  # 0x61
    "OMANYTE",  # 0x62
    "OMASTAR",  # 0x63
    "JIGGLYPUFF",  # 0x64
    "WIGGLYTUFF",  # 0x65
    "EEVEE",  # 0x66
    "FLAREON",  # 0x67
    "JOLTEON",  # 0x68
    "VAPOREON",  # 0x69
    "MACHOP",  # 0x6A
    "ZUBAT",  # 0x6B
    "EKANS",  # 0x6C
    "PARAS",  # 0x6D
    "POLIWHIRL",  # 0x6E
    "POLIWRATH",  # 0x6F
    "WEEDLE",  # 0x70
    "KAKUNA",  # 0x71
    "BEEDRILL",  # 0x72
    "MISSINGNO",  # 0x73
    "DODRIO",  # 0x74
    "PRIMEAPE",  # 0x75
    "DUGTRIO",  # 0x76
    "VENOMOTH",  # 0x77
    "DEWGONG",  # 0x78
    "MISSINGNO",  # 0x79
    "MISSINGNO",  # 0x7A
    "CATERPIE",  # 0x7B
    "METAPOD",  # 0x7C
    "BUTTERFREE",  # 0x7D
    "MACHAMP",  # 0x7E
    "MISSINGNO",  # 0x7F
    "GOLDUCK",  # 0x80
    "HYPNO",  # 0x81
    "GOLBAT",  # 0x82
    "MEWTWO",  # 0x83
    "SNORLAX",  # 0x84
    "MAGIKARP",  # 0x85
    "MISSINGNO",  # 0x86
    "MISSINGNO",  # 0x87
    "MUK",  # 0x88
    "MISSINGNO",  # 0x89
    "KINGLER",  # 0x8A
    "CLOYSTER",  # 0x8B
    "MISSINGNO",  # 0x8C
    "ELECTRODE",  # 0x8D
    "CLEFABLE",  # 0x8E
    "WEEZING",  # 0x8F
    "PERSIAN",  # 0x90
    "MAROWAK",  # 0x91
    "MISSINGNO",  # 0x92
    "HAUNTER",  # 0x93
    "ABRA",  # 0x94
    "ALAKAZAM",  # 0x95
    "PIDGEOTTO",  # 0x96
    "PIDGEOT",  # 0x97
    "STARMIE",  # 0x98
    "BULBASAUR",  # 0x99
    "VENUSAUR",  # 0x9A
    "TENTACRUEL",  # 0x9B
    "MISSINGNO",  # 0x9C
    "GOLDEEN",  # 0x9D
    "SEAKING",  # 0x9E
    "MISSINGNO",  # 0x9F
    "MISSINGNO",  # 0xA0
    "MISSINGNO",  # 0xA1
    "MISSINGNO",  # 0xA2
    "PONYTA",  # 0xA3
    "RAPIDASH",  # 0xA4
    "RATTATA",  # 0xA5
    "RATICATE",  # 0xA6
    "NIDORINO",  # 0xA7
    "NIDORINA",  # 0xA8
    "GEODUDE",  # 0xA9
    "PORYGON",  # 0xAA
    "AERODACTYL",  # 0xAB
    "MISSINGNO",  # 0xAC
    "MAGNEMITE",  # 0xAD
    "MISSINGNO",  # 0xAE
    "MISSINGNO",  # 0xAF
    "CHARMANDER",  # 0xB0
    "SQUIRTLE",  # 0xB1
    "CHARMELEON",  # 0xB2
    "WARTORTLE",  # 0xB3
    "CHARIZARD",  # 0xB4
    "MISSINGNO",  # 0xB5
    "MISSINGNO",  # 0xB6
    "MISSINGNO",  # 0xB7
    "MISSINGNO",  # 0xB8
    "ODDISH",  # 0xB9
    "GLOOM",  # 0xBA
    "VILEPLUME",  # 0xBB
    "BELLSPROUT",  # 0xBC
    "WEEPINBELL",  # 0xBD
    "VICTREEBEL",  # 0xBE
)

# National Dex number -> internal index
DEX_TO_INTERNAL = {
    1: 0x99, 2: 0x09, 3: 0x9A, 4: 0xB0, 5: 0xB2, 6: 0xB4, 7: 0xB1, 8: 0xB3,
    9: 0x1C, 10: 0x7B, 11: 0x7C, 12: 0x7D, 13: 0x70, 14: 0x71, 15: 0x72, 16: 0x24,
    17: 0x96, 18: 0x97, 19: 0xA5, 20: 0xA6, 21: 0x05, 22: 0x23, 23: 0x6C, 24: 0x2D,
    25: 0x54, 26: 0x55, 27: 0x60, 28: 0x61, 29: 0x0F, 30: 0xA8, 31: 0x10, 32: 0x03,
    33: 0xA7, 34: 0x07, 35: 0x04, 36: 0x8E, 37: 0x52, 38: 0x53, 39: 0x64, 40: 0x65,
    41: 0x6B, 42: 0x82, 43: 0xB9, 44: 0xBA, 45: 0xBB, 46: 0x6D, 47: 0x2E, 48: 0x41,
    49: 0x77, 50: 0x3B, 51: 0x76, 52: 0x4D, 53: 0x90, 54: 0x2F, 55: 0x80, 56: 0x39,
    57: 0x75, 58: 0x21, 59: 0x14, 60: 0x47, 61: 0x6E, 62: 0x6F, 63: 0x94, 64: 0x26,
    65: 0x95, 66: 0x6A, 67: 0x29, 68: 0x7E, 69: 0xBC, 70: 0xBD, 71: 0xBE, 72: 0x18,
    73: 0x9B, 74: 0xA9, 75: 0x27, 76: 0x31, 77: 0xA3, 78: 0xA4, 79: 0x25, 80: 0x08,
    81: 0xAD, 82: 0x36, 83: 0x40, 84: 0x46, 85: 0x74, 86: 0x3A, 87: 0x78, 88: 0x0D,
    89: 0x88, 90: 0x17, 91: 0x8B, 92: 0x19, 93: 0x93, 94: 0x0E, 95: 0x22, 96: 0x30,
    97: 0x81, 98: 0x4E, 99: 0x8A, 100: 0x06, 101: 0x8D, 102: 0x0C, 103: 0x0A, 104: 0x11,
    105: 0x91, 106: 0x2B, 107: 0x2C, 108: 0x0B, 109: 0x37, 110: 0x8F, 111: 0x12, 112: 0x01,
    113: 0x28, 114: 0x1E, 115: 0x02, 116: 0x5C, 117: 0x5D, 118: 0x9D, 119: 0x9E, 120: 0x1B,
    121: 0x98, 122: 0x2A, 123: 0x1A, 124: 0x48, 125: 0x35, 126: 0x33, 127: 0x1D, 128: 0x3C,
    129: 0x85, 130: 0x16, 131: 0x13, 132: 0x4C, 133: 0x66, 134: 0x69, 135: 0x68, 136: 0x67,
    137: 0xAA, 138: 0x62, 139: 0x63, 140: 0x5A, 141: 0x5B, 142: 0xAB, 143: 0x84, 144: 0x4A,
    145: 0x4B, 146: 0x49, 147: 0x58, 148: 0x59, 149: 0x42, 150: 0x83, 151: 0x15,
}

# Reverse mapping
INTERNAL_TO_DEX = {v: k for k, v in DEX_TO_INTERNAL.items()}


def get_species_name(species_id):
    """Name for an internal species index; out-of-table indices return INVALID."""
    if 0 <= species_id < len(SPECIES_NAMES):
        return SPECIES_NAMES[species_id]
    return INVALID_NAME


def dex_to_internal(dex_no):
    """Internal index for a National Dex number (1..151), or None."""
    return DEX_TO_INTERNAL.get(dex_no)


def internal_to_dex(species_id):
    """National Dex number for an internal index, or None for glitch/unused slots."""
    return INTERNAL_TO_DEX.get(species_id)


def get_dex_name(dex_no):
    """Name for a National Dex number; unknown numbers return INVALID."""
    species_id = dex_to_internal(dex_no)
    if species_id is None:
        return INVALID_NAME
    return get_species_name(species_id)
