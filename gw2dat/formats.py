"""Enumerations and fixed binary layouts used by the game's .dat archive."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from enum import IntEnum, IntFlag
from typing import ClassVar, TypeVar

__all__ = [
    "Language",
    "FourCC",
    "FileType",
    "CompressionFlag",
    "MftEntryFlag",
    "VertexFormat",
    "DatHeader",
    "MftHeader",
    "MftEntry",
    "FileIdEntry",
    "FileReference",
    "AtexHeader",
    "PfHeader",
    "PfChunkHeader",
    "ModelMaterialPermutations",
    "ModelMaterialData",
    "ModelTextureReference",
]


class Language(IntEnum):
    """Language codes stored in string files."""

    ENGLISH = 0
    KOREAN = 1
    FRENCH = 2
    GERMAN = 3
    SPANISH = 4
    CHINESE = 5


class FourCC(IntEnum):
    """Little-endian signatures that identify files and chunks."""

    # Offset 0
    ATEX = 0x58455441
    ATTX = 0x58545441
    ATEC = 0x43455441
    ATEP = 0x50455441
    ATEU = 0x55455441
    ATET = 0x54455441
    DCX_3D = 0x58434433
    DXT = 0x00545844
    DDS = 0x20534444
    strs = 0x73727473
    asnd = 0x646E7361
    RIFF = 0x46464952
    TTF = 0x00000100  # embedded OpenType fonts carrying a ttf header
    OggS = 0x5367674F
    ARAP = 0x50415241
    CTEX = 0x58455443

    # Texture codecs
    DXT1 = 0x31545844
    DXT2 = 0x32545844
    DXT3 = 0x33545844
    DXT4 = 0x34545844
    DXT5 = 0x35545844
    DXTN = 0x4E545844
    DXTL = 0x4C545844
    DXTA = 0x41545844
    R32F = 0x00000072

    # RIFF
    WEBP = 0x50424557

    # PF
    ARMF = 0x464D5241
    ASND = 0x444E5341
    ABNK = 0x4B4E4241
    ABIX = 0x58494241
    AMSP = 0x50534D41
    CDHS = 0x53484443
    CINP = 0x504E4943
    cntc = 0x63746E63
    MODL = 0x4C444F4D
    GEOM = 0x4D4F4547
    DEPS = 0x53504544
    EULA = 0x616C7565
    hvkC = 0x436B7668
    locl = 0x6C636F6C
    mapc = 0x6370616D
    mpsd = 0x6473706D
    PIMG = 0x474D4950
    AMAT = 0x54414D41
    anic = 0x63696E61
    emoc = 0x636F6D65
    prlt = 0x746C7270
    cmpc = 0x63706D63
    txtm = 0x6D747874
    txtV = 0x56747874
    txtv = 0x76747874
    PNG = 0x474E5089
    cmaC = 0x43616D63
    mMet = 0x74654D6D
    AFNT = 0x544E4641

    # Shorter signatures
    MZ = 0x5A4D
    PF = 0x4650
    MP3 = 0xFBFF
    JPEG = 0xFFD8FF
    ID3 = 0x334449
    BINK2 = 0x32424B
    UTF8 = 0xBFBBEF


class FileType(IntEnum):
    """Known kinds of files held in the archive."""

    UNKNOWN = 0

    TEXTURE_START = 1
    ATEX = 2
    ATTX = 3
    ATEC = 4
    ATEP = 5
    ATEU = 6
    ATET = 7
    CTEX = 8
    DDS = 9
    JPEG = 10
    WEBP = 11
    PNG = 12
    TEXTURE_END = 13

    SOUND_START = 14
    SOUND = 15
    ASND_MP3 = 16
    ASND_OGG = 17
    PACKED_MP3 = 18
    PACKED_OGG = 19
    OGG = 20
    MP3 = 21
    SOUND_END = 22

    RIFF = 23

    PF = 24
    MANIFEST = 25
    TEXT_PACK_MANIFEST = 26
    TEXT_PACK_VARIANT = 27
    TEXT_PACK_VOICES = 28
    BANK = 29
    BANK_INDEX = 30
    MODEL = 31
    MODEL_COLLISION_MANIFEST = 32
    DEPENDENCY_TABLE = 33
    EULA = 34
    GAME_CONTENT = 35
    GAME_CONTENT_PORTAL_MANIFEST = 36
    MAP_COLLISION = 37
    MAP_PARAM = 38
    MAP_SHADOW = 39
    MAP_METADATA = 40
    PAGED_IMAGE_TABLE = 41
    MATERIAL = 42
    COMPOSITE = 43
    CINEMATIC = 44
    ANIM_SEQUENCES = 45
    EMOTE_ANIMATION = 46
    AUDIO_SCRIPT = 47
    SHADER_CACHE = 48
    CONFIG = 49

    BINARY = 50
    DLL = 51
    EXE = 52

    STRING_FILE = 53
    FONT_FILE = 54
    BITMAP_FONT_FILE = 55
    BINK2_VIDEO = 56
    ARAP = 57
    UTF8 = 58
    TEXT = 59

    def is_texture(self) -> bool:
        """Whether this type lies in the texture range."""
        cls = type(self)
        return cls.TEXTURE_START < self < cls.TEXTURE_END

    def is_sound(self) -> bool:
        """Whether this type lies in the sound range."""
        cls = type(self)
        return cls.SOUND_START < self < cls.SOUND_END


class CompressionFlag(IntEnum):
    """Compression flags of MFT entries."""

    UNCOMPRESSED = 0
    COMPRESSED = 8


class MftEntryFlag(IntFlag):
    """Usage flags of MFT entries."""

    NONE = 0
    IN_USE = 1


class VertexFormat(IntFlag):
    """Flexible vertex format fields of model meshes."""

    POSITION = 0x00000001
    WEIGHTS = 0x00000002
    GROUP = 0x00000004
    NORMAL = 0x00000008
    COLOR = 0x00000010
    TANGENT = 0x00000020
    BITANGENT = 0x00000040
    TANGENT_FRAME = 0x00000080
    UV32_MASK = 0x0000FF00
    UV16_MASK = 0x00FF0000
    UNKNOWN1 = 0x01000000
    UNKNOWN2 = 0x02000000
    UNKNOWN3 = 0x04000000
    UNKNOWN4 = 0x08000000
    POSITION_COMPRESSED = 0x10000000
    UNKNOWN5 = 0x20000000


_S = TypeVar("_S", bound="_Packed")


class _Packed:
    """Shared reading and writing of packed little-endian records."""

    _STRUCT: ClassVar[struct.Struct]
    SIZE: ClassVar[int]

    @classmethod
    def _unpack(cls, data: bytes) -> tuple:
        if len(data) < cls._STRUCT.size:
            raise ValueError(
                f"{cls.__name__} needs {cls._STRUCT.size} bytes, got {len(data)}"
            )
        return cls._STRUCT.unpack_from(data)

    @classmethod
    def from_bytes(cls: type[_S], data: bytes) -> _S:
        """Read the record from the start of ``data``."""
        return cls(*cls._unpack(data))

    def _fields(self) -> tuple:
        return astuple(self)  # type: ignore[call-overload]

    def to_bytes(self) -> bytes:
        """Pack the record back into its on-disk form."""
        return self._STRUCT.pack(*self._fields())


def _layout(fmt: str) -> struct.Struct:
    return struct.Struct("<" + fmt)


@dataclass(frozen=True)
class DatHeader(_Packed):
    """Archive file header."""

    _STRUCT: ClassVar[struct.Struct] = _layout("B3sIIIIIQII")
    SIZE: ClassVar[int] = _STRUCT.size

    version: int
    identifier: bytes
    header_size: int
    unknown_field1: int
    chunk_size: int
    crc: int
    unknown_field2: int
    mft_offset: int
    mft_size: int
    flags: int

    @classmethod
    def from_bytes(cls, data: bytes) -> DatHeader:
        """Read the header from the start of ``data``."""
        return cls(*cls._unpack(data))


@dataclass(frozen=True)
class MftHeader(_Packed):
    """Header of the master file table (entry 0)."""

    _STRUCT: ClassVar[struct.Struct] = _layout("4sQIQ")
    SIZE: ClassVar[int] = _STRUCT.size

    identifier: bytes
    unknown_field1: int
    num_entries: int
    unknown_field2: int

    @classmethod
    def from_bytes(cls, data: bytes) -> MftHeader:
        """Read the header from the start of ``data``."""
        return cls(*cls._unpack(data))


@dataclass(frozen=True)
class MftEntry(_Packed):
    """One master file table entry."""

    _STRUCT: ClassVar[struct.Struct] = _layout("QIHHII")
    SIZE: ClassVar[int] = _STRUCT.size

    offset: int
    size: int
    compression_flag: int
    entry_flags: int
    counter: int
    crc: int

    @classmethod
    def from_bytes(cls, data: bytes) -> MftEntry:
        """Read the entry from the start of ``data``."""
        return cls(*cls._unpack(data))

    @property
    def is_compressed(self) -> bool:
        return self.compression_flag == CompressionFlag.COMPRESSED

    @property
    def in_use(self) -> bool:
        return bool(self.entry_flags & MftEntryFlag.IN_USE)


@dataclass(frozen=True)
class FileIdEntry(_Packed):
    """Mapping of a file id to an MFT entry index."""

    _STRUCT: ClassVar[struct.Struct] = _layout("II")
    SIZE: ClassVar[int] = _STRUCT.size

    file_id: int
    mft_entry_index: int

    @classmethod
    def from_bytes(cls, data: bytes) -> FileIdEntry:
        """Read the entry from the start of ``data``."""
        return cls(*cls._unpack(data))


@dataclass(frozen=True)
class FileReference(_Packed):
    """Reference to another file, stored as three 16-bit parts."""

    _STRUCT: ClassVar[struct.Struct] = _layout("3H")
    SIZE: ClassVar[int] = _STRUCT.size

    parts: tuple[int, int, int]

    @classmethod
    def from_bytes(cls, data: bytes) -> FileReference:
        """Read the reference from the start of ``data``."""
        return cls(tuple(cls._unpack(data)))  # type: ignore[arg-type]

    def _fields(self) -> tuple:
        return tuple(self.parts)


@dataclass(frozen=True)
class AtexHeader(_Packed):
    """Header of ATEX-family textures."""

    _STRUCT: ClassVar[struct.Struct] = _layout("4s4sHH")
    SIZE: ClassVar[int] = _STRUCT.size

    identifier: bytes
    format: bytes
    width: int
    height: int

    @classmethod
    def from_bytes(cls, data: bytes) -> AtexHeader:
        """Read the header from the start of ``data``."""
        return cls(*cls._unpack(data))

    @property
    def identifier_integer(self) -> int:
        return int.from_bytes(self.identifier, "little")

    @property
    def format_integer(self) -> int:
        return int.from_bytes(self.format, "little")


@dataclass(frozen=True)
class PfHeader(_Packed):
    """Header of PF container files."""

    _STRUCT: ClassVar[struct.Struct] = _layout("2sHHH4s")
    SIZE: ClassVar[int] = _STRUCT.size

    identifier: bytes
    unknown_field1: int
    unknown_field2: int
    pk_file_version: int
    type: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> PfHeader:
        """Read the header from the start of ``data``."""
        return cls(*cls._unpack(data))

    @property
    def type_integer(self) -> int:
        return int.from_bytes(self.type, "little")


@dataclass(frozen=True)
class PfChunkHeader(_Packed):
    """Header of a chunk inside a PF file."""

    _STRUCT: ClassVar[struct.Struct] = _layout("4sIHHI")
    SIZE: ClassVar[int] = _STRUCT.size

    chunk_type: bytes
    chunk_data_size: int
    chunk_version: int
    chunk_header_size: int
    offset_table_offset: int

    @classmethod
    def from_bytes(cls, data: bytes) -> PfChunkHeader:
        """Read the chunk header from the start of ``data``."""
        return cls(*cls._unpack(data))

    @property
    def chunk_type_integer(self) -> int:
        return int.from_bytes(self.chunk_type, "little")


@dataclass(frozen=True)
class ModelMaterialPermutations(_Packed):
    """Material permutations record of a MODL chunk."""

    _STRUCT: ClassVar[struct.Struct] = _layout("QIi")
    SIZE: ClassVar[int] = _STRUCT.size

    token: int
    material_count: int
    materials_offset: int

    @classmethod
    def from_bytes(cls, data: bytes) -> ModelMaterialPermutations:
        """Read the record from the start of ``data``."""
        return cls(*cls._unpack(data))


@dataclass(frozen=True)
class ModelMaterialData(_Packed):
    """Material information record of a MODL chunk."""

    _STRUCT: ClassVar[struct.Struct] = _layout("QIiIIIiIiIiIiIiB")
    SIZE: ClassVar[int] = _STRUCT.size

    token: int
    material_id: int
    material_file_offset: int
    material_flags: int
    sort_order: int
    texture_count: int
    textures_offset: int
    constants_count: int
    constants_offset: int
    mat_const_links_count: int
    mat_const_links_offset: int
    uv_trans_links_count: int
    uv_trans_links_offset: int
    tex_transforms4_count: int
    tex_transforms4_offset: int
    tex_coord_count: int

    @classmethod
    def from_bytes(cls, data: bytes) -> ModelMaterialData:
        """Read the record from the start of ``data``."""
        return cls(*cls._unpack(data))


@dataclass(frozen=True)
class ModelTextureReference(_Packed):
    """Texture reference record of a MODL chunk."""

    _STRUCT: ClassVar[struct.Struct] = _layout("iIQQIB")
    SIZE: ClassVar[int] = _STRUCT.size

    offset_to_file_reference: int
    texture_flags: int
    token: int
    blit_id: int
    uv_anim_id: int
    uv_ps_input_index: int

    @classmethod
    def from_bytes(cls, data: bytes) -> ModelTextureReference:
        """Read the record from the start of ``data``."""
        return cls(*cls._unpack(data))