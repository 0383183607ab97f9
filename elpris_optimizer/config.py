PRICE_API_URL = "https://www.elprisetjustnu.se/api/v1/prices/{year}/{month:02d}-{day:02d}_{zone}.json"
REQUEST_TIMEOUT = 10      # seconds per request

PRICE_ZONES = ("SE1", "SE2", "SE3", "SE4")
CHARGING_DURATIONS = (2, 4, 8)  # hours

TIMEZONE = "Europe/Stockholm"
ORE_PER_SEK = 100         # prices are fetched in SEK/kWh, shown in öre/kWh
