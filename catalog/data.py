# catalog/data.py
# Sample line-up used by the showroom until a real catalog feed is wired in.

VEHICLES = [
    {
        "id": "camry-hybrid", "name": "Toyota Camry Hybrid", "price": 129900,
        "category": "Hybrid", "engine": "2.5L Dynamic Force 4-Cylinder Hybrid",
        "transmission": "ECVT", "power_hp": 218, "fuel_economy": 22.2,
        "seats": 5, "sunroof": True, "screen_in": 12.3, "safety_rating": "5-Star",
        "warranty": "8-year Hybrid Battery Warranty",
    },
    {
        "id": "corolla-hybrid", "name": "Toyota Corolla Hybrid", "price": 94500,
        "category": "Hybrid", "engine": "1.8L 4-Cylinder Hybrid",
        "transmission": "ECVT", "power_hp": 138, "fuel_economy": 26.3,
        "seats": 5, "sunroof": False, "screen_in": 8.0, "safety_rating": "5-Star",
        "warranty": "8-year Hybrid Battery Warranty",
    },
    {
        "id": "rav4-hybrid", "name": "Toyota RAV4 Hybrid", "price": 139900,
        "category": "Hybrid", "engine": "2.5L Dynamic Force 4-Cylinder Hybrid",
        "transmission": "ECVT with AWD", "power_hp": 218, "fuel_economy": 21.3,
        "seats": 5, "sunroof": True, "screen_in": 10.5, "safety_rating": "5-Star",
        "warranty": "8-year Hybrid Battery Warranty",
    },
    {
        "id": "highlander-hybrid", "name": "Toyota Highlander Hybrid", "price": 179900,
        "category": "Hybrid", "engine": "3.5L V6 Hybrid",
        "transmission": "ECVT with AWD", "power_hp": 243, "fuel_economy": 14.9,
        "seats": 7, "sunroof": True, "screen_in": 12.3, "safety_rating": "5-Star",
        "warranty": "8-year Hybrid Battery Warranty",
    },
    {
        "id": "land-cruiser", "name": "Toyota Land Cruiser", "price": 249900,
        "category": "SUV", "engine": "3.5L V6 Twin-Turbo",
        "transmission": "10-Speed Automatic", "power_hp": 409, "fuel_economy": 10.0,
        "seats": 8, "sunroof": True, "screen_in": 12.3, "safety_rating": "5-Star",
        "warranty": "5 years / 200,000 km",
    },
    {
        "id": "prado", "name": "Toyota Prado", "price": 189900,
        "category": "SUV", "engine": "4.0L V6",
        "transmission": "6-Speed Automatic", "power_hp": 271, "fuel_economy": 8.9,
        "seats": 7, "sunroof": True, "screen_in": 9.0, "safety_rating": "5-Star",
        "warranty": "5 years / 200,000 km",
    },
    {
        "id": "camry", "name": "Toyota Camry", "price": 119900,
        "category": "Sedan", "engine": "2.5L 4-Cylinder",
        "transmission": "8-Speed Automatic", "power_hp": 203, "fuel_economy": 13.9,
        "seats": 5, "sunroof": True, "screen_in": 9.0, "safety_rating": "5-Star",
        "warranty": "5 years / 200,000 km",
    },
    {
        "id": "corolla", "name": "Toyota Corolla", "price": 84900,
        "category": "Sedan", "engine": "1.6L 4-Cylinder",
        "transmission": "CVT", "power_hp": 121, "fuel_economy": 16.7,
        "seats": 5, "sunroof": False, "screen_in": 8.0, "safety_rating": "5-Star",
        "warranty": "5 years / 200,000 km",
    },
]

# Trim grades per model, keyed by the vehicle id they belong to.
GRADES = {
    "camry": [
        {
            "id": "camry-le", "name": "LE", "price": 32500, "badge": "Base",
            "engine": "2.5L 4-Cylinder Hybrid", "power": "208 HP", "torque": "221 Nm",
            "transmission": "CVT", "acceleration": "7.8 seconds",
            "fuel_economy": "22.2 km/L", "co2": "104 g/km",
            "features": ["Toyota Safety Sense 3.0", "8-inch Touchscreen", "LED Headlights"],
        },
        {
            "id": "camry-xle", "name": "XLE", "price": 35500, "badge": "Popular",
            "engine": "2.5L 4-Cylinder Hybrid", "power": "218 HP", "torque": "221 Nm",
            "transmission": "CVT", "acceleration": "7.6 seconds",
            "fuel_economy": "23.8 km/L", "co2": "98 g/km",
            "features": ["Premium Audio System", "Wireless Charging", "Power Moonroof"],
        },
        {
            "id": "camry-limited", "name": "Limited", "price": 41500, "badge": "Premium",
            "engine": "2.5L 4-Cylinder Hybrid", "power": "218 HP", "torque": "221 Nm",
            "transmission": "CVT", "acceleration": "7.6 seconds",
            "fuel_economy": "23.8 km/L", "co2": "98 g/km",
            "features": ["Leather-trimmed Seats", "360° Camera", "Head-up Display"],
        },
    ],
    "land-cruiser": [
        {
            "id": "lc-gx", "name": "GX", "price": 289900, "badge": "Essential",
            "engine": "3.5L V6 Twin-Turbo", "power": "409 HP", "torque": "650 Nm",
            "transmission": "10-Speed Automatic", "acceleration": "6.7 seconds",
            "fuel_economy": "10.0L/100km", "co2": "229 g/km",
            "features": ["Toyota Safety Sense 3.0", "LED Headlights", "Apple CarPlay"],
        },
        {
            "id": "lc-gxr", "name": "GXR", "price": 329900, "badge": "Popular",
            "engine": "3.5L V6 Twin-Turbo", "power": "409 HP", "torque": "650 Nm",
            "transmission": "10-Speed Automatic", "acceleration": "6.7 seconds",
            "fuel_economy": "10.0L/100km", "co2": "229 g/km",
            "features": ["Leather Interior", "Sunroof", "Wireless Charging"],
        },
        {
            "id": "lc-vxr", "name": "VXR", "price": 369900, "badge": "Premium",
            "engine": "3.5L V6 Twin-Turbo", "power": "409 HP", "torque": "650 Nm",
            "transmission": "10-Speed Automatic", "acceleration": "6.7 seconds",
            "fuel_economy": "10.0L/100km", "co2": "229 g/km",
            "features": ["JBL Premium Audio", "Head-Up Display", "20\" Premium Wheels"],
        },
        {
            "id": "lc-gr-sport", "name": "GR Sport", "price": 419900, "badge": "Performance",
            "engine": "3.5L V6 Twin-Turbo", "power": "409 HP", "torque": "650 Nm",
            "transmission": "10-Speed Automatic", "acceleration": "6.7 seconds",
            "fuel_economy": "10.0L/100km", "co2": "229 g/km",
            "features": ["GR-Tuned Suspension", "Sport Exhaust System", "22\" GR Wheels"],
        },
    ],
}
