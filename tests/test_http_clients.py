"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx

from diet_tracker.adapters.telegram_client import HttpxTelegramClient


def test_telegram_client_sends_message_with_markup() -> None:
    seen: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/sendMessage")
        seen.append(json.loads(request.content.decode()))
        return httpx.Response(200, json={"ok": True, "result": {}})

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxTelegramClient(bot_token="token", http_client=async_client)

    asyncio.run(
        client.send_message(
            chat_id=1, text="Hi", reply_markup={"inline_keyboard": []}
        )
    )
    asyncio.run(client.send_message(chat_id=2, text="Plain"))

    assert seen[0] == {
        "chat_id": 1,
        "text": "Hi",
        "reply_markup": {"inline_keyboard": []},
    }
    assert "reply_markup" not in seen[1]


def test_telegram_client_raises_on_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"ok": False})

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxTelegramClient(bot_token="token", http_client=async_client)

    try:
        asyncio.run(client.send_message(chat_id=1, text="Hi"))
    except httpx.HTTPStatusError as exc:
        assert exc.response.status_code == 403
    else:
        raise AssertionError("expected HTTPStatusError")
