"""Tests for uploaded file storage."""

import io

import pytest
from PIL import Image

from findeasily.shared.core.exceptions import FileTooLargeError, InvalidFileTypeError
from findeasily.shared.infrastructure.storage.file_manager import FileService


@pytest.fixture
def file_service(tmp_path):
    return FileService(str(tmp_path), max_size=64 * 1024)


class TestFileService:

    async def test_user_picture_stored_under_user_folder(self, file_service, png_bytes, tmp_path):
        path = await file_service.store_user_picture("u1", "../../me.PNG", png_bytes)

        assert path.startswith("users/u1/")
        assert path.endswith(".png")
        assert (tmp_path / path).read_bytes() == png_bytes

    async def test_listing_photos_get_distinct_names(self, file_service, png_bytes):
        first = await file_service.store_listing_photo("l1", "a.png", png_bytes)
        second = await file_service.store_listing_photo("l1", "a.png", png_bytes)

        assert first.startswith("listings/l1/")
        assert first != second
        assert file_service.resolve(first).exists()

    async def test_rejects_disallowed_extension(self, file_service, png_bytes):
        with pytest.raises(InvalidFileTypeError):
            await file_service.store_user_picture("u1", "script.exe", png_bytes)

    async def test_rejects_non_image_content(self, file_service):
        with pytest.raises(InvalidFileTypeError):
            await file_service.store_user_picture("u1", "fake.png", b"definitely not a png")

    async def test_rejects_empty_file(self, file_service):
        with pytest.raises(InvalidFileTypeError):
            await file_service.store_user_picture("u1", "empty.png", b"")

    async def test_rejects_oversized_file(self, tmp_path, png_bytes):
        service = FileService(str(tmp_path), max_size=10)
        with pytest.raises(FileTooLargeError) as exc_info:
            await service.store_user_picture("u1", "big.png", png_bytes)
        assert exc_info.value.status_code == 413

    async def test_rejects_tiny_image(self, file_service):
        buffer = io.BytesIO()
        Image.new("RGB", (2, 2)).save(buffer, format="PNG")
        with pytest.raises(InvalidFileTypeError):
            await file_service.store_user_picture("u1", "dot.png", buffer.getvalue())

    async def test_nothing_written_on_rejection(self, file_service, tmp_path):
        with pytest.raises(InvalidFileTypeError):
            await file_service.store_listing_photo("l1", "fake.jpg", b"junk")
        assert not (tmp_path / "listings").exists()
