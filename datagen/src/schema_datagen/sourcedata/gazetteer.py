"""
Built-in gazetteer of named coordinates.

CITIES are major airports (referenced by geo_city rules), SEAPORTS feed
maritime field heuristics and VEHICLE_LOCATIONS are UAE city, hub and
warehouse sites used for last-mile logistics data.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Place:
    """A named coordinate with an optional code (IATA, UN/LOCODE) and kind."""

    name: str
    lat: float
    lon: float
    code: str | None = None
    kind: str | None = None

    def as_point(self) -> dict[str, float]:
        return {"lat": self.lat, "lon": self.lon}


CITIES: list[Place] = [
    # North America
    Place("New York (JFK)", 40.6413, -73.7781, "JFK"),
    Place("Los Angeles (LAX)", 33.9416, -118.4085, "LAX"),
    Place("Chicago (ORD)", 41.9742, -87.9073, "ORD"),
    Place("San Francisco (SFO)", 37.6213, -122.3790, "SFO"),
    Place("Miami (MIA)", 25.7959, -80.2870, "MIA"),
    Place("Seattle (SEA)", 47.4502, -122.3088, "SEA"),
    Place("Boston (BOS)", 42.3656, -71.0096, "BOS"),
    Place("Toronto (YYZ)", 43.6777, -79.6248, "YYZ"),
    Place("Vancouver (YVR)", 49.1967, -123.1815, "YVR"),
    Place("Mexico City (MEX)", 19.4363, -99.0721, "MEX"),
    # Europe
    Place("London (LHR)", 51.4700, -0.4543, "LHR"),
    Place("Paris (CDG)", 49.0097, 2.5479, "CDG"),
    Place("Frankfurt (FRA)", 50.0379, 8.5622, "FRA"),
    Place("Amsterdam (AMS)", 52.3105, 4.7683, "AMS"),
    Place("Madrid (MAD)", 40.4839, -3.5680, "MAD"),
    Place("Rome (FCO)", 41.8003, 12.2389, "FCO"),
    Place("Istanbul (IST)", 41.2753, 28.7519, "IST"),
    Place("Moscow (SVO)", 55.9726, 37.4146, "SVO"),
    Place("Zurich (ZRH)", 47.4582, 8.5556, "ZRH"),
    Place("Barcelona (BCN)", 41.2974, 2.0833, "BCN"),
    # Asia
    Place("Tokyo (NRT)", 35.7720, 140.3929, "NRT"),
    Place("Dubai (DXB)", 25.2532, 55.3657, "DXB"),
    Place("Singapore (SIN)", 1.3644, 103.9915, "SIN"),
    Place("Hong Kong (HKG)", 22.3080, 113.9185, "HKG"),
    Place("Beijing (PEK)", 40.0799, 116.6031, "PEK"),
    Place("Shanghai (PVG)", 31.1443, 121.8083, "PVG"),
    Place("Seoul (ICN)", 37.4602, 126.4407, "ICN"),
    Place("Bangkok (BKK)", 13.6900, 100.7501, "BKK"),
    Place("Mumbai (BOM)", 19.0896, 72.8656, "BOM"),
    Place("Delhi (DEL)", 28.5562, 77.1000, "DEL"),
    # Oceania
    Place("Sydney (SYD)", -33.9399, 151.1753, "SYD"),
    Place("Melbourne (MEL)", -37.6690, 144.8410, "MEL"),
    Place("Auckland (AKL)", -37.0082, 174.7850, "AKL"),
    # South America
    Place("São Paulo (GRU)", -23.4356, -46.4731, "GRU"),
    Place("Buenos Aires (EZE)", -34.8222, -58.5358, "EZE"),
    Place("Lima (LIM)", -12.0219, -77.1143, "LIM"),
    # Africa
    Place("Johannesburg (JNB)", -26.1392, 28.2460, "JNB"),
    Place("Cairo (CAI)", 30.1219, 31.4056, "CAI"),
    Place("Nairobi (NBO)", -1.3192, 36.9278, "NBO"),
]

SEAPORTS: list[Place] = [
    # Asia
    Place("Shanghai Port", 31.2304, 121.4737, "CNSHA"),
    Place("Singapore Port", 1.2644, 103.8220, "SGSIN"),
    Place("Ningbo-Zhoushan Port", 29.8683, 121.5440, "CNNGB"),
    Place("Shenzhen Port", 22.5431, 114.0579, "CNSZX"),
    Place("Guangzhou Port", 23.1291, 113.2644, "CNGZH"),
    Place("Busan Port", 35.1028, 129.0403, "KRPUS"),
    Place("Hong Kong Port", 22.3193, 114.1694, "HKHKG"),
    Place("Qingdao Port", 36.0671, 120.3826, "CNTAO"),
    Place("Tianjin Port", 38.9795, 117.7417, "CNTSN"),
    Place("Port Klang", 2.9987, 101.3932, "MYPKG"),
    Place("Dubai Port", 25.2854, 55.3607, "AEDXB"),
    Place("Tokyo Port", 35.6437, 139.7673, "JPTYO"),
    Place("Mumbai Port", 18.9667, 72.8333, "INBOM"),
    Place("Chennai Port", 13.1021, 80.2984, "INMAA"),
    Place("Bangkok Port", 13.7074, 100.5332, "THBKK"),
    # Europe
    Place("Rotterdam Port", 51.9225, 4.4792, "NLRTM"),
    Place("Antwerp Port", 51.2194, 4.4025, "BEANR"),
    Place("Hamburg Port", 53.5459, 9.9716, "DEHAM"),
    Place("Valencia Port", 39.4561, -0.3545, "ESVLC"),
    Place("Piraeus Port", 37.9478, 23.6425, "GRPIR"),
    Place("Felixstowe Port", 51.9540, 1.2979, "GBFXT"),
    Place("Le Havre Port", 49.4944, 0.1079, "FRLEH"),
    Place("Genoa Port", 44.4056, 8.9463, "ITGOA"),
    Place("Barcelona Port", 41.3675, 2.1609, "ESBCN"),
    Place("Algeciras Port", 36.1256, -5.4318, "ESALG"),
    # North America
    Place("Los Angeles Port", 33.7406, -118.2719, "USLAX"),
    Place("Long Beach Port", 33.7545, -118.1932, "USLGB"),
    Place("New York/New Jersey Port", 40.6683, -74.0458, "USNYC"),
    Place("Savannah Port", 32.0282, -81.1649, "USSAV"),
    Place("Houston Port", 29.7210, -95.2622, "USHOU"),
    Place("Seattle Port", 47.5952, -122.3359, "USSEA"),
    Place("Vancouver Port", 49.2827, -123.1207, "CAVAN"),
    Place("Montreal Port", 45.5017, -73.5673, "CAYMQ"),
    Place("Panama Canal (Pacific)", 8.8837, -79.5199, "PABAL"),
    Place("Veracruz Port", 19.1945, -96.1331, "MXVER"),
    # South America
    Place("Santos Port", -23.9537, -46.3054, "BRSSZ"),
    Place("Buenos Aires Port", -34.6037, -58.3816, "ARBUE"),
    Place("Callao Port", -12.0467, -77.1547, "PECLL"),
    Place("Cartagena Port", 10.3910, -75.5148, "COCTG"),
    Place("Valparaiso Port", -33.0458, -71.6197, "CLVAP"),
    # Oceania
    Place("Sydney Port", -33.8568, 151.2153, "AUSYD"),
    Place("Melbourne Port", -37.8314, 144.9344, "AUMEL"),
    Place("Brisbane Port", -27.3812, 153.1753, "AUBNE"),
    Place("Auckland Port", -36.8406, 174.7594, "NZAKL"),
    # Africa
    Place("Port Said (Suez Canal)", 31.2564, 32.3018, "EGPSD"),
    Place("Durban Port", -29.8587, 31.0218, "ZADUR"),
    Place("Cape Town Port", -33.9072, 18.4233, "ZACPT"),
    Place("Lagos Port", 6.4474, 3.3903, "NGLOS"),
    Place("Alexandria Port", 31.2001, 29.9187, "EGALY"),
    Place("Mombasa Port", -4.0544, 39.6661, "KEMBA"),
]

VEHICLE_LOCATIONS: list[Place] = [
    # Dubai
    Place("Dubai Downtown", 25.1972, 55.2744, kind="city"),
    Place("Dubai Marina", 25.0805, 55.1397, kind="city"),
    Place("Dubai Mall", 25.1972, 55.2796, kind="hub"),
    Place("Burj Khalifa", 25.1972, 55.2744, kind="hub"),
    Place("Dubai International Airport", 25.2532, 55.3657, kind="hub"),
    Place("Jebel Ali Port", 24.9857, 55.0272, kind="warehouse"),
    Place("Dubai Silicon Oasis", 25.1245, 55.3789, kind="hub"),
    Place("Dubai Industrial City", 24.8951, 55.1493, kind="warehouse"),
    Place("Dubai Logistics City", 25.0208, 55.1767, kind="warehouse"),
    Place("Dubai Internet City", 25.0965, 55.1674, kind="hub"),
    Place("Dubai Media City", 25.0987, 55.1632, kind="hub"),
    Place("JBR - Jumeirah Beach", 25.0788, 55.1345, kind="city"),
    Place("Business Bay", 25.1883, 55.2645, kind="hub"),
    Place("Dubai Creek Harbour", 25.1847, 55.3453, kind="city"),
    Place("Dubai Sports City", 25.0397, 55.2066, kind="city"),
    Place("Dubai Motor City", 25.0416, 55.2301, kind="city"),
    Place("Dubai World Central", 24.8969, 55.1612, kind="hub"),
    Place("Dubai South", 24.8972, 55.1557, kind="warehouse"),
    # Abu Dhabi
    Place("Abu Dhabi Downtown", 24.4539, 54.3773, kind="city"),
    Place("Abu Dhabi Corniche", 24.4796, 54.3517, kind="city"),
    Place("Yas Island", 24.4889, 54.6087, kind="hub"),
    Place("Abu Dhabi Airport", 24.4330, 54.6511, kind="hub"),
    Place("Abu Dhabi Port", 24.5237, 54.3771, kind="warehouse"),
    Place("Masdar City", 24.4286, 54.6175, kind="hub"),
    Place("Al Raha Beach", 24.5106, 54.6361, kind="city"),
    Place("Khalifa City", 24.4217, 54.5982, kind="city"),
    Place("Mussafah Industrial", 24.3675, 54.5049, kind="warehouse"),
    Place("ICAD Industrial City", 24.3397, 54.5273, kind="warehouse"),
    # Sharjah
    Place("Sharjah City Center", 25.3463, 55.4209, kind="city"),
    Place("Sharjah Airport", 25.3286, 55.5172, kind="hub"),
    Place("Sharjah Industrial Area", 25.3179, 55.4117, kind="warehouse"),
    Place("Sharjah Hamriyah Free Zone", 25.4416, 55.5353, kind="warehouse"),
    # Ajman
    Place("Ajman City Center", 25.4052, 55.5136, kind="city"),
    Place("Ajman Free Zone", 25.3896, 55.4850, kind="warehouse"),
    # Ras Al Khaimah
    Place("Ras Al Khaimah Downtown", 25.7899, 55.9432, kind="city"),
    Place("RAK Free Trade Zone", 25.6929, 55.9283, kind="warehouse"),
    # Fujairah
    Place("Fujairah City", 25.1288, 56.3265, kind="city"),
    Place("Fujairah Port", 25.1133, 56.3500, kind="warehouse"),
    # Umm Al Quwain
    Place("Umm Al Quwain Center", 25.5647, 55.5550, kind="city"),
    # Al Ain
    Place("Al Ain City Center", 24.2075, 55.7447, kind="city"),
    Place("Al Ain Industrial Area", 24.1886, 55.7645, kind="warehouse"),
]

WAREHOUSES: list[Place] = [p for p in VEHICLE_LOCATIONS if p.kind == "warehouse"]

_CITIES_BY_NAME = {city.name: city for city in CITIES}
_CITIES_BY_CODE = {city.code: city for city in CITIES if city.code}


def find_city(name: str) -> Place | None:
    """
    Look up a gazetteer city by exact name (``"Dubai (DXB)"``) or IATA code.

    Returns None when the city is not in the gazetteer.
    """
    return _CITIES_BY_NAME.get(name) or _CITIES_BY_CODE.get(name.strip().upper())
