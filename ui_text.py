APP_NAME = "Cupcake"

NEW_CUPCAKE_ORDER = "New Cupcake Order"

ORDER_DETAILS = """Quantity: {quantity}
Flavor: {flavor}
Pickup date: {pickup_date}
Total: {total}

Thank you!"""


def cupcakes(quantity: int) -> str:
    return "1 cupcake" if quantity == 1 else f"{quantity} cupcakes"
