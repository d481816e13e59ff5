"""
Closed vocabularies used by the name-based field heuristics.

Plain UPPERCASE lists; the multi-language tables live in
``schema_datagen.sourcedata.translations``.
"""

GENDERS = ["female", "male"]

GENERIC_STATUSES = ["Active", "Inactive"]
ORDER_STATUSES = ["Pending", "Processing", "Shipped", "Delivered", "Cancelled", "Refunded"]
PAYMENT_STATUSES = ["Pending", "Paid", "Failed", "Refunded", "Processing"]
MARITAL_STATUSES = ["Single", "Married", "Divorced", "Widowed", "Separated"]

DOGS = ["Bella", "Charlie", "Max", "Luna", "Rocky", "Milo", "Buddy", "Coco"]

DEPARTMENTS = [
    "Sales",
    "Marketing",
    "Engineering",
    "HR",
    "Finance",
    "Operations",
    "IT",
    "Customer Service",
]

ROLE_DESCRIPTORS = [
    "Lead",
    "Senior",
    "Direct",
    "Corporate",
    "Dynamic",
    "Future",
    "Product",
    "National",
    "Regional",
    "District",
    "Central",
    "Global",
    "Customer",
    "Investor",
    "International",
    "Legacy",
    "Forward",
    "Internal",
    "Human",
    "Chief",
    "Principal",
]

DEGREES = [
    "High School Diploma",
    "Associate Degree",
    "Bachelor of Arts",
    "Bachelor of Science",
    "Master of Arts",
    "Master of Science",
    "MBA",
    "PhD",
]

CLOTHING_SIZES = ["XS", "S", "M", "L", "XL", "XXL", "XXXL"]

PRODUCT_ADJECTIVES = [
    "Small",
    "Ergonomic",
    "Rustic",
    "Intelligent",
    "Gorgeous",
    "Incredible",
    "Fantastic",
    "Practical",
    "Sleek",
    "Awesome",
    "Generic",
    "Handcrafted",
    "Handmade",
    "Licensed",
    "Refined",
    "Unbranded",
    "Tasty",
]
PRODUCT_MATERIALS = [
    "Steel",
    "Wooden",
    "Concrete",
    "Plastic",
    "Cotton",
    "Granite",
    "Rubber",
    "Metal",
    "Soft",
    "Fresh",
    "Frozen",
]
PRODUCT_NOUNS = [
    "Chair",
    "Car",
    "Computer",
    "Keyboard",
    "Mouse",
    "Bike",
    "Ball",
    "Gloves",
    "Pants",
    "Shirt",
    "Table",
    "Shoes",
    "Hat",
    "Towels",
    "Soap",
    "Tuna",
    "Chicken",
    "Fish",
    "Cheese",
    "Bacon",
    "Pizza",
    "Salad",
    "Sausages",
    "Chips",
]
PRODUCT_CATEGORIES = [
    "Books",
    "Movies",
    "Music",
    "Games",
    "Electronics",
    "Computers",
    "Home",
    "Garden",
    "Tools",
    "Grocery",
    "Health",
    "Beauty",
    "Toys",
    "Kids",
    "Baby",
    "Clothing",
    "Shoes",
    "Jewelery",
    "Sports",
    "Outdoors",
    "Automotive",
    "Industrial",
]

# Aviation
IATA_CODES = [
    "JFK", "SFO", "LHR", "CDG", "BOM", "NRT", "DEL",
    "LAX", "ORD", "DXB", "SIN", "HKG", "ICN", "SYD",
]
ICAO_CODES = [
    "KJFK", "KSFO", "EGLL", "LFPG", "VABB", "RJAA", "VIDP",
    "KLAX", "KORD", "OMDB", "WSSS", "VHHH", "RKSI", "YSSY",
]

# Maritime
VESSEL_NAMES = [
    "Pacific Explorer",
    "Atlantic Star",
    "Ocean Navigator",
    "Sea Voyager",
    "Marine Pioneer",
    "Global Trader",
    "Container Express",
    "Cargo Master",
]
VESSEL_TYPES = [
    "Container Ship",
    "Tanker",
    "Bulk Carrier",
    "Cruise Ship",
    "Cargo Ship",
    "RoRo Vessel",
    "LNG Carrier",
    "General Cargo",
]
IMO_NUMBERS = [
    "IMO9876543",
    "IMO9234567",
    "IMO9567890",
    "IMO9345678",
    "IMO9456789",
    "IMO9678901",
    "IMO9789012",
    "IMO9890123",
]

# Road
VEHICLE_TYPES = [
    "Sedan",
    "SUV",
    "Van",
    "Truck",
    "Delivery Van",
    "Box Truck",
    "Pickup Truck",
    "Cargo Van",
]
VEHICLE_MAKES = [
    "Toyota",
    "Ford",
    "Honda",
    "Chevrolet",
    "Mercedes",
    "Volkswagen",
    "Tesla",
    "Nissan",
    "BMW",
    "Hyundai",
]
