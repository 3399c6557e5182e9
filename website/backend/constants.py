STATE_KEY = "NOM_ENT"
MUNICIPALITY_KEY = "NOM_MUN"
COMMUNITY_KEY = "NOM_COM"
LOCALITY_KEY = "NOM_LOC"
PEOPLE_KEY = "Pueblo"
ID_KEY = "ID"

FACETS = ("state", "municipality", "community", "people")

# most specific first
VIEWPORT_TIERS = [
    {"tier": "community", "maxZoom": 16, "padding": {"top": 100, "bottom": 100, "left": 100, "right": 400}},
    {"tier": "municipality", "maxZoom": 12, "padding": {"top": 80, "bottom": 80, "left": 80, "right": 380}},
    {"tier": "state", "maxZoom": 9, "padding": {"top": 60, "bottom": 60, "left": 60, "right": 360}},
    {"tier": "none", "maxZoom": 16, "padding": {"top": 50, "bottom": 50, "left": 50, "right": 350}},
]

CSV_LON_COLUMNS = ("lon", "longitude", "LONGITUD")
CSV_LAT_COLUMNS = ("lat", "latitude", "LATITUD")
