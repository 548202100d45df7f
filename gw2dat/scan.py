"""Scanning of archive entries: identification and categorisation."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Protocol

from .formats import FileType, Language

__all__ = [
    "DatSource",
    "ScannedEntry",
    "required_identification_size",
    "is_bitmap_font_chunk",
    "string_file_language",
    "categorize",
    "scan_entries",
]

_INITIAL_PEEK_SIZE = 32


class DatSource(Protocol):
    """What the scanner needs from an opened archive."""

    @property
    def num_files(self) -> int:
        """Number of MFT entries in the archive."""

    def peek_file(self, entry: int, size: int) -> bytes:
        """Return up to ``size`` leading bytes of an entry; empty if it has none."""

    def read_file(self, entry: int) -> bytes:
        """Return the whole contents of an entry."""

    def identify_file_type(self, data: bytes) -> tuple[FileType, bool]:
        """Identify ``data``; the flag is False when more data is needed."""

    def base_id_from_file_num(self, entry: int) -> int:
        """Base id of the entry, or zero if it has none."""

    def file_id_from_file_num(self, entry: int) -> int:
        """File id of the entry."""


@dataclass(frozen=True)
class ScannedEntry:
    """One identified and categorised archive entry."""

    base_id: int
    file_id: int
    file_type: FileType
    mft_entry: int
    name: str
    category: tuple[str, ...]


def _ranges(*spans: tuple[int, int]) -> frozenset[int]:
    return frozenset(n for first, last in spans for n in range(first, last + 1))


# Chunks belonging to the bitmap font stored in file number 154945.
_BITMAP_FONT_CHUNKS = _ranges(
    (154824, 154829),
    (154842, 154846),
    (154876, 154887),
    (154889, 154896),
    (154898, 154942),
    (154944, 154944),
    (439864, 439887),
    (439896, 439999),
    (459802, 459809),
    (459926, 459926),
    (459935, 459935),
    (459981, 459981),
    (858064, 858135),
)

_TEXTURE_NAMES = {
    FileType.ATEX: "Generic Textures",
    FileType.ATTX: "Terrain Textures",
    FileType.ATEC: "ATEC",
    FileType.ATEP: "Map Textures",
    FileType.ATEU: "UI Textures",
    FileType.ATET: "ATET",
    FileType.CTEX: "CTEX",
    FileType.DDS: "DDS",
    FileType.JPEG: "JPEG",
    FileType.WEBP: "WebP",
    FileType.PNG: "PNG",
}

_ATEX_FAMILY = frozenset(
    {
        FileType.ATEX,
        FileType.ATTX,
        FileType.ATEC,
        FileType.ATEP,
        FileType.ATEU,
        FileType.ATET,
    }
)

_SOUND_NAMES = {
    FileType.SOUND: None,
    FileType.MP3: "MP3",
    FileType.OGG: "Ogg",
    FileType.ASND_MP3: "asndMP3",
    FileType.ASND_OGG: "asndOgg",
    FileType.PACKED_MP3: "PackedMP3",
    FileType.PACKED_OGG: "PackedOgg",
}

_SIMPLE_CATEGORIES = {
    FileType.BINARY: "Binaries",
    FileType.EXE: "Binaries",
    FileType.DLL: "Binaries",
    FileType.MANIFEST: "Manifests",
    FileType.TEXT: "Text",
    FileType.UTF8: "Text",
    FileType.TEXT_PACK_MANIFEST: "TextPack Manifests",
    FileType.TEXT_PACK_VARIANT: "TextPack Variant",
    FileType.TEXT_PACK_VOICES: "TextPack Voices",
    FileType.BANK: "Soundbank",
    FileType.BANK_INDEX: "Soundbank Index",
    FileType.AUDIO_SCRIPT: "Audio Scripts",
    FileType.MODEL_COLLISION_MANIFEST: "Model Collision Manifest",
    FileType.DEPENDENCY_TABLE: "Dependency Tables",
    FileType.EULA: "EULA",
    FileType.CINEMATIC: "Cinematics",
    FileType.MAP_COLLISION: "Map Collision",
    FileType.GAME_CONTENT: "Game Content",
    FileType.GAME_CONTENT_PORTAL_MANIFEST: "Game Content Portal Manifest",
    FileType.MAP_PARAM: "Map",
    FileType.MAP_SHADOW: "Map Shadow",
    FileType.MAP_METADATA: "Map Metadata",
    FileType.PAGED_IMAGE_TABLE: "Paged Image Table",
    FileType.MATERIAL: "Materials",
    FileType.COMPOSITE: "Composite Data",
    FileType.ANIM_SEQUENCES: "Animation Sequences",
    FileType.EMOTE_ANIMATION: "Emote Animations",
    FileType.FONT_FILE: "Font",
    FileType.BITMAP_FONT_FILE: "Bitmap Font",
    FileType.BINK2_VIDEO: "Bink Videos",
    FileType.SHADER_CACHE: "Shader Cache",
    FileType.CONFIG: "Configuration",
}


def required_identification_size(data: bytes, file_type: FileType) -> int:
    """How many bytes the identifier wants to see for a partly identified entry."""
    if file_type == FileType.BINARY:
        if len(data) >= 0x40:
            (pe_offset,) = struct.unpack_from("<I", data, 0x3C)
            return pe_offset + 0x18
        return 0x140
    if file_type == FileType.SOUND:
        return 0x80
    return 0x20


def is_bitmap_font_chunk(base_id: int) -> bool:
    """Whether ``base_id`` is one of the known bitmap font chunks."""
    return base_id in _BITMAP_FONT_CHUNKS


def string_file_language(data: bytes) -> int:
    """Language code of a strings file, stored two bytes before its end."""
    if len(data) < 2:
        raise ValueError("strings file too short to hold a language code")
    return data[-2]


def _texture_category(file_type: FileType, data: bytes) -> tuple[str, ...]:
    path = ["Textures", _TEXTURE_NAMES[file_type]]
    if file_type in _ATEX_FAMILY and len(data) >= 12:
        width, height = struct.unpack_from("<HH", data, 8)
        path.append(f"{width}x{height}")
    elif file_type == FileType.DDS and len(data) >= 20:
        (height,) = struct.unpack_from("<I", data, 12)
        (width,) = struct.unpack_from("<I", data, 16)
        path.append(f"{width}x{height}")
    return tuple(path)


def _string_category(read_file: Optional[Callable[[], bytes]]) -> tuple[str, ...]:
    if read_file is None:
        raise ValueError("categorising a strings file needs its full contents")
    code = string_file_language(read_file())
    try:
        return ("Strings", Language(code).name.capitalize())
    except ValueError:
        return ("Strings", "Unknown", str(code))


def categorize(
    file_type: FileType,
    data: bytes,
    base_id: int = 0,
    read_file: Optional[Callable[[], bytes]] = None,
) -> tuple[str, ...]:
    """Category path of an entry, from the top-level category down.

    ``data`` holds the leading bytes of the entry; ``read_file`` returns the
    whole entry and is only called for strings files.
    """
    if file_type in _TEXTURE_NAMES:
        return _texture_category(file_type, data)

    if file_type in _SOUND_NAMES:
        sub = _SOUND_NAMES[file_type]
        return ("Sounds",) if sub is None else ("Sounds", sub)

    if file_type == FileType.STRING_FILE:
        return _string_category(read_file)

    if file_type == FileType.MODEL:
        return ("Models", f"{base_id // 10000}xxxx")

    if file_type in _SIMPLE_CATEGORIES:
        return (_SIMPLE_CATEGORIES[file_type],)

    if file_type in (FileType.PF, FileType.ARAP):
        if file_type == FileType.PF and len(data) >= 12:
            return ("Misc", data[8:12].decode("latin-1"))
        return ("Misc",)

    if is_bitmap_font_chunk(base_id):
        return ("Bitmap Font", "Chunk")
    return ("Unknown",)


def _identify(source: DatSource, entry: int) -> tuple[bytes, FileType]:
    data = source.peek_file(entry, _INITIAL_PEEK_SIZE)
    if not data:
        return data, FileType.UNKNOWN

    file_type, complete = source.identify_file_type(data)
    last_requested = _INITIAL_PEEK_SIZE
    while not complete:
        required = required_identification_size(data, file_type)
        if required == last_requested:
            break
        last_requested = required
        data = source.peek_file(entry, required)
        file_type, complete = source.identify_file_type(data)
    return data, file_type


def scan_entries(source: DatSource, start: int = 0) -> Iterator[ScannedEntry]:
    """Identify and categorise every non-empty entry from ``start`` onwards."""
    for entry in range(start, source.num_files):
        data, file_type = _identify(source, entry)
        if not data:
            continue

        base_id = source.base_id_from_file_num(entry)
        category = categorize(
            file_type,
            data,
            base_id,
            lambda entry=entry: source.read_file(entry),
        )
        name = str(base_id) if base_id else f"ID-less_{entry}"
        yield ScannedEntry(
            base_id=base_id,
            file_id=source.file_id_from_file_num(entry),
            file_type=file_type,
            mft_entry=entry,
            name=name,
            category=category,
        )