# Fixed option sets offered by the wizard
QUANTITY_OPTIONS = [
    ("One Cupcake", 1),
    ("Six Cupcakes", 6),
    ("Twelve Cupcakes", 12),
]

FLAVORS = [
    "Vanilla",
    "Chocolate",
    "Red Velvet",
    "Salted Caramel",
    "Coffee",
]
