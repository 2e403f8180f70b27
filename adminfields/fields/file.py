# -*- coding: utf-8 -*-
"""
file

Upload fields: generic files, images, video and audio.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, ClassVar

from ..core.types import ElementType
from ..schema.descriptors import AttachmentOptions
from .base import FieldDescriptor
from .registry import registry


@registry.register("file-field", ElementType.FILE)
class FileField(FieldDescriptor):
    """Upload field; constraints travel to the client in the ``attachment`` block."""

    def _attachment(self) -> AttachmentOptions:
        return self.attachment or AttachmentOptions()

    def accepted_types(self, *mime_types: str) -> "FileField":
        options = self._attachment().model_copy(update={"accepted_types": tuple(mime_types)})
        return self._with(attachment=options)

    def max_size(self, size: int) -> "FileField":
        return self._with(attachment=self._attachment().model_copy(update={"max_size": size}))

    def store(self, disk: str, path: str = "") -> "FileField":
        options = self._attachment().model_copy(update={"disk": disk, "path": path or None})
        return self._with(attachment=options)

    def json_serialize(self) -> dict[str, Any]:
        payload = super().json_serialize()
        if self.attachment is not None:
            payload["attachment"] = {
                "accepted_types": list(self.attachment.accepted_types),
                "max_size": self.attachment.max_size,
                "disk": self.attachment.disk,
                "path": self.attachment.path,
            }
        return payload


@registry.register("image-field", ElementType.FILE)
class ImageField(FileField):
    pass


class VideoField(FileField):
    """Rendered by the generic file component."""

    data_type: ClassVar[ElementType | None] = ElementType.VIDEO


class AudioField(FileField):
    """Rendered by the generic file component."""

    data_type: ClassVar[ElementType | None] = ElementType.AUDIO


# The End
