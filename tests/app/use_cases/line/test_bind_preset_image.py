"""Testes do use case de vínculo de imagem (upload + promoção)."""

from __future__ import annotations

from urllib.parse import parse_qs

import pytest

from app.constants.line_replies import (
    ACCESS_DENIED_TEXT,
    BINDING_PROMPT_TEXT,
    TARGET_NOT_FOUND_TEXT,
)
from app.domain.admins import AdminSet
from app.domain.presets import PresetRegistry
from app.infra.storage import MemoryObjectStorage
from app.protocols.models import (
    ButtonsReply,
    EventSource,
    ImageMessage,
    ImageReply,
    MessageContent,
    MessageEvent,
    PostbackEvent,
    TextReply,
)
from app.use_cases.line import BindPresetImageUseCase
from tests.fakes.fake_line_messaging import FakeLineMessaging
from tests.fakes.recording_storage import RecordingObjectStorage
from utils.errors import ContentFetchError, StorageObjectNotFoundError

BUCKET = "bkt"
ADMIN = "U-admin"


def _use_case(
    messaging: FakeLineMessaging,
    storage: MemoryObjectStorage,
    presets: list[tuple[str, str]] | None = None,
) -> BindPresetImageUseCase:
    return BindPresetImageUseCase(
        messaging=messaging,
        storage=storage,
        bucket=BUCKET,
        registry=PresetRegistry.from_pairs(
            presets or [("menu1", "images/menu1.jpg"), ("menu2", "images/menu2.jpg")]
        ),
        admins=AdminSet.from_ids([ADMIN]),
    )


def _image_event(
    user_id: str | None = ADMIN,
    message_id: str = "M1",
) -> tuple[MessageEvent, ImageMessage]:
    message = ImageMessage(id=message_id)
    event = MessageEvent(
        reply_token="rt-img",
        source=EventSource(type="user", user_id=user_id),
        message=message,
    )
    return event, message


def _postback(data: str) -> PostbackEvent:
    return PostbackEvent(
        reply_token="rt-pb",
        source=EventSource(type="user", user_id="U-anyone"),
        data=data,
    )


class TestHandleUpload:
    """Testes para handle_upload."""

    @pytest.mark.asyncio
    async def test_non_admin_is_denied_without_fetch_or_storage(self) -> None:
        messaging = FakeLineMessaging()
        storage = MemoryObjectStorage()
        use_case = _use_case(messaging, storage)
        event, message = _image_event(user_id="U-stranger")

        result = await use_case.handle_upload(event, message)

        assert result.outcome == "denied"
        assert messaging.fetched == []
        assert messaging.sent_messages == [TextReply(text=ACCESS_DENIED_TEXT)]
        assert storage.get(BUCKET, "uploads/anything.jpg") is None

    @pytest.mark.asyncio
    async def test_source_without_user_id_is_denied(self) -> None:
        messaging = FakeLineMessaging()
        use_case = _use_case(messaging, MemoryObjectStorage())
        event, message = _image_event(user_id=None)

        result = await use_case.handle_upload(event, message)

        assert result.outcome == "denied"
        assert messaging.fetched == []

    @pytest.mark.asyncio
    async def test_admin_upload_creates_temp_object_and_prompts(self) -> None:
        messaging = FakeLineMessaging(
            contents={"M1": MessageContent(data=b"jpeg-bytes", content_type="image/jpeg")}
        )
        storage = MemoryObjectStorage()
        use_case = _use_case(messaging, storage)
        event, message = _image_event()

        result = await use_case.handle_upload(event, message)

        assert result.outcome == "pending"
        assert result.pending is not None
        stored = storage.get(BUCKET, result.pending.temp_path)
        assert stored is not None
        assert stored.data == b"jpeg-bytes"
        assert stored.content_type == "image/jpeg"

        assert len(messaging.replies) == 1
        prompt = messaging.replies[0].messages[0]
        assert isinstance(prompt, ButtonsReply)
        assert prompt.text == BINDING_PROMPT_TEXT
        assert [action.label for action in prompt.actions] == ["menu1", "menu2"]
        for action in prompt.actions:
            params = parse_qs(action.data)
            assert params["pending"] == [result.pending.pending_id]
            assert params["target"] == [action.label]

    @pytest.mark.asyncio
    async def test_non_image_content_type_falls_back_to_jpeg(self) -> None:
        messaging = FakeLineMessaging(
            contents={"M1": MessageContent(data=b"x", content_type="application/octet-stream")}
        )
        storage = MemoryObjectStorage()
        event, message = _image_event()

        result = await _use_case(messaging, storage).handle_upload(event, message)

        assert result.pending is not None
        stored = storage.get(BUCKET, result.pending.temp_path)
        assert stored is not None
        assert stored.content_type == "image/jpeg"

    @pytest.mark.asyncio
    async def test_fetch_failure_propagates_without_reply(self) -> None:
        messaging = FakeLineMessaging()
        storage = MemoryObjectStorage()
        event, message = _image_event(message_id="missing")

        with pytest.raises(ContentFetchError):
            await _use_case(messaging, storage).handle_upload(event, message)

        assert messaging.replies == []


class TestHandlePostback:
    """Testes para handle_postback."""

    @pytest.mark.asyncio
    async def test_promotes_and_replies_text_then_image(self) -> None:
        messaging = FakeLineMessaging()
        storage = MemoryObjectStorage()
        await storage.upload(BUCKET, "uploads/p1.jpg", b"new", "image/jpeg")

        result = await _use_case(messaging, storage).handle_postback(
            _postback("pending=p1&target=menu2")
        )

        assert result.outcome == "promoted"
        assert result.target_path == "images/menu2.jpg"
        assert storage.get(BUCKET, "images/menu2.jpg").data == b"new"  # type: ignore[union-attr]
        assert len(messaging.replies) == 2
        assert messaging.replies[0].messages == [TextReply(text="画像を更新しました: menu2")]
        assert messaging.replies[1].messages == [
            ImageReply(url="https://storage.googleapis.com/bkt/images/menu2.jpg")
        ]

    @pytest.mark.asyncio
    async def test_same_pending_can_be_promoted_twice(self) -> None:
        """Sem uso único: o mesmo upload pode ir para outro preset."""
        messaging = FakeLineMessaging()
        storage = MemoryObjectStorage()
        await storage.upload(BUCKET, "uploads/p1.jpg", b"new", "image/jpeg")
        use_case = _use_case(messaging, storage)

        await use_case.handle_postback(_postback("pending=p1&target=menu1"))
        result = await use_case.handle_postback(_postback("pending=p1&target=menu2"))

        assert result.outcome == "promoted"
        assert storage.exists(BUCKET, "images/menu1.jpg")
        assert storage.exists(BUCKET, "images/menu2.jpg")

    @pytest.mark.asyncio
    async def test_unknown_target_replies_not_found(self) -> None:
        messaging = FakeLineMessaging()
        storage = MemoryObjectStorage()
        await storage.upload(BUCKET, "uploads/p1.jpg", b"new", "image/jpeg")

        result = await _use_case(messaging, storage).handle_postback(
            _postback("pending=p1&target=menu9")
        )

        assert result.outcome == "target_not_found"
        assert messaging.sent_messages == [TextReply(text=TARGET_NOT_FOUND_TEXT)]
        assert not storage.exists(BUCKET, "images/menu9.jpg")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("data", ["pending=&target=menu9", "pending=a/b&target=menu9"])
    async def test_unknown_target_is_checked_before_pending_id(self, data: str) -> None:
        messaging = FakeLineMessaging()

        result = await _use_case(messaging, MemoryObjectStorage()).handle_postback(
            _postback(data)
        )

        assert result.outcome == "target_not_found"
        assert messaging.sent_messages == [TextReply(text=TARGET_NOT_FOUND_TEXT)]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("data", ["pending=&target=menu1", "pending=../x&target=menu1"])
    async def test_invalid_pending_id_with_known_target_is_ignored(self, data: str) -> None:
        messaging = FakeLineMessaging()
        storage = RecordingObjectStorage()

        result = await _use_case(messaging, storage).handle_postback(_postback(data))

        assert result.outcome == "ignored"
        assert messaging.replies == []
        assert storage.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("data", ["", "pending=p1", "target=menu1", "richmenu=1"])
    async def test_missing_fields_are_ignored_silently(self, data: str) -> None:
        messaging = FakeLineMessaging()

        result = await _use_case(messaging, MemoryObjectStorage()).handle_postback(
            _postback(data)
        )

        assert result.outcome == "ignored"
        assert messaging.replies == []

    @pytest.mark.asyncio
    async def test_missing_temp_object_propagates_without_reply(self) -> None:
        messaging = FakeLineMessaging()

        with pytest.raises(StorageObjectNotFoundError):
            await _use_case(messaging, MemoryObjectStorage()).handle_postback(
                _postback("pending=ghost&target=menu1")
            )

        assert messaging.replies == []
