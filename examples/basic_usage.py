"""
Basic Usage Example

This example demonstrates the fundamental concepts of the event center:
- Subscribing handlers to named events
- Emitting events with a payload
- Stopping a dispatch round by returning False
- Unsubscribing by handler, by id, or all at once
- Using the process-wide default center

Run with: python examples/basic_usage.py
"""

import logging

import eventcenter
from eventcenter import EventCenter, EventCenterConfig

# =============================================================================
# Step 1: Define handlers
# =============================================================================
# Handlers receive {"data": <copy of payload>}. Returning False stops the
# handlers registered after them for the current emit.


def audit(message):
    print(f"[audit] order event: {message['data']}")


def reject_large_orders(message):
    if message["data"]["total"] > 1000:
        print("[guard] order too large, stopping dispatch")
        return False
    return None


def confirm(message):
    order = message["data"]
    print(f"[confirm] order {order['order_id']} confirmed for {order['total']:.2f}")


# =============================================================================
# Step 2: Wire them up on a dedicated center
# =============================================================================


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s | %(message)s")

    center = EventCenter(EventCenterConfig(name="orders", enable_tracing=False))

    audit_id = center.subscribe("order.created", audit)
    center.subscribe("order.created", reject_large_orders)
    center.subscribe("order.created", confirm)

    print("\n--- Small order: every handler runs ---")
    center.emit("order.created", {"order_id": 1, "total": 25.0})

    print("\n--- Large order: dispatch stops at the guard ---")
    center.emit("order.created", {"order_id": 2, "total": 5000.0})

    print("\n--- Handlers get a copy; the caller's payload is untouched ---")
    payload = {"order_id": 3, "total": 10.0}

    def tamper(message):
        message["data"]["total"] = 0

    center.subscribe("order.created", tamper)
    center.emit("order.created", payload)
    print(f"payload after emit: {payload}")

    print("\n--- Unsubscribe by id and by handler ---")
    center.unsubscribe("order.created", audit_id)
    center.unsubscribe("order.created", tamper)
    center.emit("order.created", {"order_id": 4, "total": 42.0})

    print("\n--- Unsubscribe everything; emitting is now a no-op ---")
    center.unsubscribe("order.created")
    center.emit("order.created", {"order_id": 5, "total": 1.0})
    print(f"stats: {center.get_stats()}")

    # =========================================================================
    # Step 3: The default center
    # =========================================================================
    print("\n--- Default center ---")
    handler_id = eventcenter.subscribe("ping", lambda message: print(f"pong {message['data']}"))
    eventcenter.emit("ping", {"n": 1})
    eventcenter.unsubscribe("ping", handler_id)
    eventcenter.emit("ping", {"n": 2})


if __name__ == "__main__":
    main()
