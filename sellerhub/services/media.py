"""Media uploads to the Cloudinary CDN.

Uses the unsigned upload API with an upload preset, so no API secret is held
by this service. Returns the CDN's https URL, which is what gets stored on
sellers (profile picture) and products (image or video). The resource type is
detected by the CDN.
"""

import logging
from typing import Any

import httpx

from sellerhub.settings import get_settings

logger = logging.getLogger("uvicorn.error")

UPLOAD_FOLDERS = ("products", "profiles")


class MediaUploadError(RuntimeError):
    pass


class CloudinaryClient:
    """Client for Cloudinary's unsigned upload endpoint."""

    BASE_URL = "https://api.cloudinary.com/v1_1"

    def __init__(
        self,
        cloud_name: str | None = None,
        upload_preset: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize client from settings unless overridden."""
        settings = get_settings()
        self.cloud_name = cloud_name if cloud_name is not None else settings.cloudinary_cloud_name
        self.upload_preset = upload_preset or settings.cloudinary_upload_preset
        self._transport = transport

    @property
    def upload_url(self) -> str:
        return f"{self.BASE_URL}/{self.cloud_name}/upload"

    async def upload(self, content: bytes, filename: str, folder: str = "products") -> str:
        """Upload an image or video and return its secure URL.

        Args:
            content: Raw file bytes.
            filename: Original file name (sent as the multipart file name).
            folder: Target folder on the CDN.

        Returns:
            https URL of the stored asset.

        Raises:
            MediaUploadError: If the CDN is not configured or rejects the upload.
        """
        if not self.cloud_name:
            logger.error("CLOUDINARY_CLOUD_NAME is not set - cannot upload media")
            raise MediaUploadError("CLOUDINARY_CLOUD_NAME is not set")
        if not content:
            raise MediaUploadError("Empty file")

        data = {"upload_preset": self.upload_preset, "folder": folder}
        files = {"file": (filename or "upload", content)}

        async with httpx.AsyncClient(timeout=60.0, transport=self._transport) as client:
            try:
                resp = await client.post(self.upload_url, data=data, files=files)
            except httpx.HTTPError as e:
                logger.exception("Cloudinary upload request failed")
                raise MediaUploadError(f"Upload failed: {e}") from e

        payload = _json_or_empty(resp)
        if resp.status_code != 200:
            message = _error_message(payload)
            logger.error(f"Cloudinary upload error: {resp.status_code} - {message}")
            raise MediaUploadError(message)

        url = payload.get("secure_url")
        if not isinstance(url, str) or not url:
            raise MediaUploadError("Upload failed: no secure_url in response")

        logger.info(f"Uploaded {filename!r} to folder={folder} ({len(content)} bytes)")
        return url


def _json_or_empty(resp: httpx.Response) -> dict[str, Any]:
    try:
        data = resp.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def _error_message(payload: dict[str, Any]) -> str:
    error = payload.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return "Upload failed"
