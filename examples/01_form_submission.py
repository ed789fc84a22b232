"""
Form submission example for rest-dispatch.

Demonstrates:
- Wiring services from settings (REST_DISPATCH_* env vars)
- Installing a default header mapper at startup
- Binding a submission to ScopedUIState
- Reacting to auth and alert notifications
"""

import asyncio

from rest_dispatch import (
    AUTH_REQUIRED_TOPIC,
    SYSTEM_ALERT_TOPIC,
    RequestContext,
    ScopedUIState,
    create_rest_services,
)

services = create_rest_services(configure_logs=True)

# Every dispatched request carries the client header
services.install_header_mapper(lambda headers: {**headers, "x-client": "example"})

services.notifier.subscribe(
    AUTH_REQUIRED_TOPIC, lambda path: print(f"login required, return to {path}")
)
services.notifier.subscribe(SYSTEM_ALERT_TOPIC, lambda status: print(f"alert: {status}"))


async def submit(form: dict) -> None:
    state = ScopedUIState()
    handle = await services.scoped.dispatch(
        RequestContext(
            "PUT",
            "https://httpbin.org/status/412",
            form,
            success=lambda payload: print("saved", payload),
        ),
        state,
    )
    print("working:", state.working)
    await handle
    print("working:", state.working, "violations:", state.violations)


if __name__ == "__main__":
    asyncio.run(submit({"owner": "type", "name": "name"}))
