"""Mailer — swap implementations per environment without touching callers.

Two actions share the ``mail:send`` location. The real sender is only
registered in ``prod``; everywhere else an outbox that records messages
takes its place. Async handlers run through ``Action.arun``.

Run:
    LOCATOR_ACTIVE_LAYERS=dev python app.py
"""

import asyncio
from typing import Any

from locator import AddressRegistryBuilder, LocatorBuilder, Not, Settings, action

OUTBOX: list[dict[str, Any]] = []


@action(layers="prod", name="smtp_send")
async def smtp_send(message: dict[str, Any]) -> str:
    # A real deployment would hand the message to an SMTP client here
    await asyncio.sleep(0)
    return f"queued for {message['to']}"


@action(layers=Not("prod"), name="outbox_send")
def outbox_send(message: dict[str, Any]) -> str:
    OUTBOX.append(message)
    return f"stored for {message['to']}"


@action(name="preview")
def preview(message: dict[str, Any]) -> str:
    return f"To: {message['to']}\nSubject: {message['subject']}"


mail = AddressRegistryBuilder()
mail.register("send", smtp_send)
mail.register("send", outbox_send)
mail.register("preview", preview)

builder = LocatorBuilder()
builder.domain("mail", mail)


def create_locator(settings: Settings | None = None):
    return builder.build(settings or Settings.from_env())


if __name__ == "__main__":
    mailer = create_locator()
    send = mailer.locate("mail", "send").unwrap()
    print(asyncio.run(send.arun({"to": "ops@example.com", "subject": "hello"})))
