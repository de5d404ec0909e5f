from __future__ import annotations

from pathlib import Path
from uuid import uuid4

import anyio
import qrcode
from qrcode.constants import ERROR_CORRECT_M


def build_qr_code(url: str) -> qrcode.QRCode:
    """A QR code whose only payload is `url`."""
    qr = qrcode.QRCode(error_correction=ERROR_CORRECT_M, box_size=10, border=4)
    qr.add_data(url)
    qr.make(fit=True)
    return qr


class QrCodeImageGenerator:
    def __init__(self, *, prefix: str = "qr_") -> None:
        self._prefix = prefix

    async def generate(self, *, url: str, target_dir: Path) -> Path:
        target_dir = Path(target_dir)
        path = target_dir / f"{self._prefix}{uuid4().hex}.png"

        def _render() -> None:
            target_dir.mkdir(parents=True, exist_ok=True)
            image = build_qr_code(url).make_image(fill_color="black", back_color="white")
            image.save(path)

        await anyio.to_thread.run_sync(_render)
        return path
