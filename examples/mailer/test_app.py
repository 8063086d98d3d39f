"""Tests for the mailer example."""

import pytest

from locator import Settings


class TestMailerApp:
    def test_dev_uses_outbox(self, example_module) -> None:
        mailer = example_module.create_locator(Settings(active_layers=frozenset({"dev"})))
        send = mailer.locate("mail", "send").unwrap()

        assert send is example_module.outbox_send
        assert send.run({"to": "a@example.com"}) == "stored for a@example.com"
        assert example_module.OUTBOX == [{"to": "a@example.com"}]

    def test_prod_uses_smtp(self, example_module) -> None:
        mailer = example_module.create_locator(Settings(active_layers=frozenset({"prod"})))
        assert mailer.locate("mail", "send").unwrap() is example_module.smtp_send

    @pytest.mark.asyncio
    async def test_prod_send_async(self, example_module) -> None:
        mailer = example_module.create_locator(Settings(active_layers=frozenset({"prod"})))
        send = mailer.locate("mail", "send").unwrap()

        assert await send.arun({"to": "ops@example.com"}) == "queued for ops@example.com"
        assert example_module.OUTBOX == []

    def test_preview_everywhere(self, example_module) -> None:
        for layers in ({"dev"}, {"prod"}, set()):
            mailer = example_module.create_locator(Settings(active_layers=frozenset(layers)))
            preview = mailer.locate("mail", "preview").unwrap()
            assert preview.run({"to": "x@example.com", "subject": "Hi"}).startswith("To: x@")
