"""
Gen 1 Save - Map Module
Map ID (byte at 0x260A) -> location name.
"""

INVALID_NAME = "INVALID"

MAP_NAMES = (
    "Pallet Town",  # 0x00
    "Viridian City",  # 0x01
    "Pewter City",  # 0x02
    "Cerulean City",  # 0x03
    "Lavender Town",  # 0x04
    "Vermilion City",  # 0x05
    "Celadon City",  # 0x06
    "Fuchsia City",  # 0x07
    "Cinnabar Island",  # 0x08
    "Pokémon League",  # 0x09
    "Saffron City",  # 0x0A
    "INVALID",  # 0x0B
    "Route 1",  # 0x0C
    "Route 2",  # 0x0D
    "Route 3",  # 0x0E
    "Route 4",  # 0x0F
    "Route 5",  # 0x10
    "Route 6",  # 0x11
    "Route 7",  # 0x12
    "Route 8",  # 0x13
    "Route 9",  # 0x14
    "Route 10",  # 0x15
    "Route 11",  # 0x16
    "Route 12",  # 0x17
    "Route 13",  # 0x18
    "Route 14",  # 0x19
    "Route 15",  # 0x1A
    "Route 16",  # 0x1B
    "Route 17",  # 0x1C
    "Route 18",  # 0x1D
    "Sea Route 19",  # 0x1E
    "Sea Route 20",  # 0x1F
    "Sea Route 21",  # 0x20
    "Route 22",  # 0x21
    "Route 23",  # 0x22
    "Route 24",  # 0x23
    "Route 25",  # 0x24
    "Red's house (first floor)",  # 0x25
    "Red's house (second floor)",  # 0x26
    "Blue's house",  # 0x27
    "Professor Oak's Lab",  # 0x28
    "Pokémon Center (Viridian City)",  # 0x29
    "Poké Mart (Viridian City)",  # 0x2A
    "School (Viridian City)",  # 0x2B
    "House 1 (Viridian City)",  # 0x2C
    "Gym (Viridian City)",  # 0x2D
    "Diglett's Cave (Route 2 entrance)",  # 0x2E
    "Gate (Viridian City/Pewter City) (Route 2)",  # 0x2F
    "Oak's Aide House 1 (Route 2)",  # 0x30
    "Gate (Route 2)",  # 0x31
    "Gate (Route 2/Viridian Forest) (Route 2)",  # 0x32
    "Viridian Forest",  # 0x33
    "Pewter Museum (floor 1)",  # 0x34
    "Pewter Museum (floor 2)",  # 0x35
    "Gym (Pewter City)",  # 0x36
    "House with disobedient Nidoran♂ (Pewter City)",  # 0x37
    "Poké Mart (Pewter City)",  # 0x38
    "House with two Trainers (Pewter City)",  # 0x39
    "Pokémon Center (Pewter City)",  # 0x3A
    "Mt. Moon (Route 3 entrance)",  # 0x3B
    "Mt. Moon",  # 0x3C
    "Mt. Moon",  # 0x3D
    "Invaded house (Cerulean City)",  # 0x3E
    "Poliwhirl for Jynx trade house (Red/Blue)",  # 0x3F
    "Pokémon Center (Cerulean City)",  # 0x40
    "Gym (Cerulean City)",  # 0x41
    "Bike Shop (Cerulean City)",  # 0x42
    "Poké Mart (Cerulean City)",  # 0x43
    "Pokémon Center (Route 4)",  # 0x44
    "Invaded house - alternative music (Cerulean City)",  # 0x45
    "Saffron City Gate (Route 5)",  # 0x46
    "Entrance to Underground Path (Route 5)",  # 0x47
    "Daycare Center (Route 5)",  # 0x48
    "Saffron City Gate (Route 6)",  # 0x49
    "Entrance to Underground Path (Route 6)",  # 0x4A
    "Entrance to Underground Path (alternative music) (Route 6)",  # 0x4B
    "Saffron City Gate (Route 7)",  # 0x4C
    "Entrance to Underground Path (Route 7)",  # 0x4D
    "INVALID",  # 0x4E
    "Saffron City Gate (Route 8)",  # 0x4F
    "Entrance to Underground Path (Route 8)",  # 0x50
    "Pokémon Center (Rock Tunnel)",  # 0x51
    "Rock Tunnel",  # 0x52
    "Power Plant",  # 0x53
    "Gate 1F (Route 11-Route 12)",  # 0x54
    "Diglett's Cave (Vermilion City entrance)",  # 0x55
    "Gate 2F (Route 11-Route 12)",  # 0x56
    "Gate (Route 12-Route 13)",  # 0x57
    "Sea Cottage",  # 0x58
    "Pokémon Center (Vermilion City)",  # 0x59
    "Pokémon Fan Club (Vermilion City)",  # 0x5A
    "Poké Mart (Vermilion City)",  # 0x5B
    "Gym (Vermilion City)",  # 0x5C
    "House with Pidgey (Vermilion City)",  # 0x5D
    "Vermilion Harbor (Vermilion City)",  # 0x5E
    "S.S. Anne 1F",  # 0x5F
    "S.S. Anne 2F",  # 0x60
    "S.S. Anne 3F",  # 0x61
    "S.S. Anne B1F",  # 0x62
    "S.S. Anne (Deck)",  # 0x63
    "S.S. Anne (Kitchen)",  # 0x64
    "S.S. Anne (Captain's room)",  # 0x65
    "S.S. Anne 1F (Gentleman's room)",  # 0x66
    "S.S. Anne 2F (Gentleman's room)",  # 0x67
    "S.S. Anne B1F (Sailor/Fisherman's room)",  # 0x68
    "INVALID",  # 0x69
    "INVALID",  # 0x6A
    "INVALID",  # 0x6B
    "Victory Road (Route 23 entrance)",  # 0x6C
    "INVALID",  # 0x6D
    "INVALID",  # 0x6E
    "INVALID",  # 0x6F
    "INVALID",  # 0x70
    "Lance's Elite Four room",  # 0x71
    "INVALID",  # 0x72
    "INVALID",  # 0x73
    "INVALID",  # 0x74
    "INVALID",  # 0x75
    "Hall of Fame",  # 0x76
    "Underground Path (Route 5-Route 6)",  # 0x77
    "Blue (Champion)'s room",  # 0x78
    "Underground Path (Route 7-Route 8)",  # 0x79
    "Celadon Department Store 1F",  # 0x7A
    "Celadon Department Store 2F",  # 0x7B
    "Celadon Department Store 3F",  # 0x7C
    "Celadon Department Store 4F",  # 0x7D
    "Celadon Department Store Rooftop Square",  # 0x7E
    "Celadon Department Store Lift",  # 0x7F
    "Celadon Mansion 1F",  # 0x80
    "Celadon Mansion 2F",  # 0x81
    "Celadon Mansion 3F",  # 0x82
    "Celadon Mansion 4F",  # 0x83
    "Celadon Mansion 4F (Eevee building)",  # 0x84
    "Pokémon Center (Celadon City)",  # 0x85
    "Gym (Celadon City)",  # 0x86
    "Rocket Game Corner (Celadon City)",  # 0x87
    "Celadon Department Store 5F",  # 0x88
    "Prize corner (Celadon City)",  # 0x89
    "Restaurant (Celadon City)",  # 0x8A
    "House with Team Rocket members (Celadon City)",  # 0x8B
    "Hotel (Celadon City)",  # 0x8C
    "Pokémon Center (Lavender Town)",  # 0x8D
    "Pokémon Tower 1F",  # 0x8E
    "Pokémon Tower 2F",  # 0x8F
    "Pokémon Tower 3F",  # 0x90
    "Pokémon Tower 4F",  # 0x91
    "Pokémon Tower 5F",  # 0x92
    "Pokémon Tower 6F",  # 0x93
    "Pokémon Tower 7F",  # 0x94
    "Mr. Fuji's house (Lavender Town)",  # 0x95
    "Poké Mart (Lavender Town)",  # 0x96
    "House with NPC discussing Cubone's mother",  # 0x97
    "Poké Mart (Fuchsia City)",  # 0x98
    "House with NPCs discussing Bill (Fuchsia City)",  # 0x99
    "Pokémon Center (Fuchsia City)",  # 0x9A
    "Warden's house (Fuchsia City)",  # 0x9B
    "Safari Zone gate (Fuchsia City)",  # 0x9C
    "Gym (Fuchsia City)",  # 0x9D
    "House with NPCs discussing Baoba (Fuchsia City)",  # 0x9E
    "Seafoam Islands",  # 0x9F
    "Seafoam Islands",  # 0xA0
    "Seafoam Islands",  # 0xA1
    "Seafoam Islands",  # 0xA2
    "Vermilion City Fishing Brother",  # 0xA3
    "Fuchsia City Fishing Brother",  # 0xA4
    "Pokémon Mansion (1F)",  # 0xA5
    "Gym (Cinnabar Island)",  # 0xA6
    "Pokémon Lab (Cinnabar Island)",  # 0xA7
    "Pokémon Lab - Trade room (Cinnabar Island)",  # 0xA8
    "Pokémon Lab - Room with scientists (Cinnabar Island)",  # 0xA9
    "Pokémon Lab - Fossil resurrection room (Cinnabar Island)",  # 0xAA
    "Pokémon Center (Cinnabar Island)",  # 0xAB
    "Poké Mart (Cinnabar Island)",  # 0xAC
    "Poké Mart - alternative music (Cinnabar Island)",  # 0xAD
    "Pokémon Center (Indigo Plateau)",  # 0xAE
    "Copycat's house 1F (Saffron City)",  # 0xAF
    "Copycat's house 2F (Saffron City)",  # 0xB0
    "Fighting Dojo (Saffron City)",  # 0xB1
    "Gym (Saffron City)",  # 0xB2
    "House with Pidgey (Saffron City)",  # 0xB3
    "Poké Mart (Saffron City)",  # 0xB4
    "Silph Co. 1F",  # 0xB5
    "Pokémon Center (Saffron City)",  # 0xB6
    "Mr. Psychic's house (Saffron City)",  # 0xB7
    "Gate 1F (Route 15)",  # 0xB8
    "Gate 2F (Route 15)",  # 0xB9
    "Gate 1F (Cycling Road) (Route 16)",  # 0xBA
    "Gate 2F (Cycling Road) (Route 16)",  # 0xBB
    "Secret house (Cycling Road) (Route 16)",  # 0xBC
    "Route 12 Fishing Brother",  # 0xBD
    "Gate 1F (Route 18)",  # 0xBE
    "Gate 2F (Route 18)",  # 0xBF
    "Seafoam Islands",  # 0xC0
    "Badges check gate (Route 22)",  # 0xC1
    "Victory Road",  # 0xC2
    "Gate 2F (Route 12)",  # 0xC3
    "House with NPC and HM moves advice (Vermilion City)",  # 0xC4
    "Diglett's Cave",  # 0xC5
    "Victory Road",  # 0xC6
    "Team Rocket Hideout (B1F)",  # 0xC7
    "Team Rocket Hideout (B2F)",  # 0xC8
    "Team Rocket Hideout (B3F)",  # 0xC9
    "Team Rocket Hideout (B4F)",  # 0xCA
    "Team Rocket Hideout (Lift)",  # 0xCB
    "INVALID",  # 0xCC
    "INVALID",  # 0xCD
    "INVALID",  # 0xCE
    "Silph Co. (2F)",  # 0xCF
    "Silph Co. (3F)",  # 0xD0
    "Silph Co. (4F)",  # 0xD1
    "Silph Co. (5F)",  # 0xD2
    "Silph Co. (6F)",  # 0xD3
    "Silph Co. (7F)",  # 0xD4
    "Silph Co. (8F)",  # 0xD5
    "Pokémon Mansion (2F)",  # 0xD6
    "Pokémon Mansion (3F)",  # 0xD7
    "Pokémon Mansion (B1F)",  # 0xD8
    "Safari Zone (Area 1)",  # 0xD9
    "Safari Zone (Area 2)",  # 0xDA
    "Safari Zone (Area 3)",  # 0xDB
    "Safari Zone (Entrance)",  # 0xDC
    "Safari Zone (Rest house 1)",  # 0xDD
    "Safari Zone (Prize house)",  # 0xDE
    "Safari Zone (Rest house 2)",  # 0xDF
    "Safari Zone (Rest house 3)",  # 0xE0
    "Safari Zone (Rest house 4)",  # 0xE1
    "Cerulean Cave",  # 0xE2
    "Cerulean Cave 1F",  # 0xE3
    "Cerulean Cave B1F",  # 0xE4
    "Name Rater's house (Lavender Town)",  # 0xE5
    "Cerulean City (Gym Badge man)",  # 0xE6
    "INVALID",  # 0xE7
    "Rock Tunnel",  # 0xE8
    "Silph Co. 9F",  # 0xE9
    "Silph Co. 10F",  # 0xEA
    "Silph Co. 11F",  # 0xEB
    "Silph Co. Lift",  # 0xEC
    "INVALID",  # 0xED
    "INVALID",  # 0xEE
    "Cable Club Trade Center(*)",  # 0xEF
    "Cable Club Colosseum(*)",  # 0xF0
    "INVALID",  # 0xF1
    "INVALID",  # 0xF2
    "INVALID",  # 0xF3
    "INVALID",  # 0xF4
    "Lorelei's room",  # 0xF5
    "Bruno's room",  # 0xF6
    "Agatha's room",  # 0xF7
    "INVALID",  # 0xF8
    "INVALID",  # 0xF9
    "INVALID",  # 0xFA
    "INVALID",  # 0xFB
    "INVALID",  # 0xFC
    "INVALID",  # 0xFD
    "INVALID",  # 0xFE
    "(Indoor-Outside Map Handler)",  # 0xFF
)


def get_map_name(map_id):
    """Location name for a map ID; unused IDs return INVALID."""
    if 0 <= map_id < len(MAP_NAMES):
        return MAP_NAMES[map_id] or INVALID_NAME
    return INVALID_NAME
