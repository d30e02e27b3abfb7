from __future__ import annotations
import logging
from supabase import create_client, Client

from settings import require_cfg
from ui_text import ORDER_DETAILS, cupcakes

log = logging.getLogger("cupcake.order_client")


def get_client() -> Client:
    url = require_cfg("SUPABASE_URL")
    anon = require_cfg("SUPABASE_ANON_KEY")
    return create_client(url, anon)


def order_details(order) -> str:
    return ORDER_DETAILS.format(
        quantity=cupcakes(order.quantity),
        flavor=order.flavor,
        pickup_date=order.pickup_date,
        total=order.display_price,
    )


def send_order(order, client: Client | None = None) -> dict:
    """
    Hands the finished order over to the bakery via the create_cupcake_order RPC.
    Returns the RPC data (may carry an order_code).
    """
    summary = order.summary()
    missing = [name for name, key in (
        ("quantity", "quantity"),
        ("flavor", "flavor"),
        ("pickup date", "pickup_date"),
    ) if not summary[key]]
    if missing:
        raise ValueError("Order is incomplete: missing " + ", ".join(missing))

    sb = client or get_client()
    payload = {
        "p_quantity": summary["quantity"],
        "p_flavor": summary["flavor"],
        "p_pickup_date": summary["pickup_date"],
        "p_total": summary["price"],
        "p_details": order_details(order),
    }
    resp = sb.rpc("create_cupcake_order", payload).execute()
    data = resp.data or {}
    if isinstance(data, list):
        data = data[0] if data else {}
    log.info("Order sent: %s x %s for %s (%s)", summary["quantity"], summary["flavor"], summary["pickup_date"], data.get("order_code"))
    return data
