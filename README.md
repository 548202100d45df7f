# gw2dat

Pure-Python helpers for working with the contents of Guild Wars 2 `.dat`
archives. It has no dependencies outside the standard library.

## Modules

- `gw2dat.formats`: the enumerations and packed little-endian records of
  the archive.
  - Enumerations: `Language`, `FourCC`, `FileType` (with `is_texture()` and
    `is_sound()`), `CompressionFlag`, `MftEntryFlag` and `VertexFormat`.
  - Frozen dataclasses: `DatHeader`, `MftHeader`, `MftEntry`, `FileIdEntry`,
    `FileReference`, `AtexHeader`, `PfHeader`, `PfChunkHeader`,
    `ModelMaterialPermutations`, `ModelMaterialData` and
    `ModelTextureReference`.
  - Each record has `from_bytes(data)`, `to_bytes()` and a `SIZE`.
    `from_bytes` raises `ValueError` when `data` is too short.
- `gw2dat.bits`: `lowest_set_bit`, `num_set_bits` and `is_power_of_two` for
  32-bit values.
- `gw2dat.scan`: sorts archive entries into category paths.
  - `categorize(file_type, data, base_id=0, read_file=None)` returns a tuple
    such as `("Textures", "Generic Textures", "256x128")`. `read_file` is
    needed only for strings files.
  - The helpers are `required_identification_size`, `is_bitmap_font_chunk`
    and `string_file_language`.
  - `scan_entries(source, start=0)` yields a `ScannedEntry` for every
    non-empty entry of a `DatSource`.
- `gw2dat.hexview`: a 16-bytes-per-line hex dump.
  - `hex_lines` yields `HexLine` objects, with `offset`, `data`, `hex` and
    `text`.
  - `format_hex_dump` joins them into text.
  - The helpers are `format_offset`, `line_count` and `filter_text_char`.
    `filter_text_char` shows anything outside printable ASCII as `.`.
- `gw2dat.channels`: shows or hides the red, green, blue and alpha channels
  of raw RGB and alpha bytes, with `Channel`, `apply_channels` and
  `ChannelState`.
  - `ChannelState.toggle` returns whether the state changed.
  - `ChannelState.apply` gives the pixel data as it appears with the
    current channels.

## Usage

Parse an ATEX texture header:

```python
from gw2dat.formats import AtexHeader, FileType

header = AtexHeader.from_bytes(data)
print(header.width, header.height)
print(FileType.ATEX.is_texture())   # True
```

Categorise an entry from its leading bytes:

```python
from gw2dat.formats import FileType
from gw2dat.scan import categorize

categorize(FileType.MODEL, b"", base_id=123456)   # ("Models", "12xxxx")
```

Produce a hex dump:

```python
from gw2dat.hexview import format_hex_dump

print(format_hex_dump(b"Hello, world!"))
# 00000000h  48 65 6c 6c 6f 2c 20 77 6f 72 6c 64 21           Hello, world!
```

Hide the blue channel of RGB pixel data:

```python
from gw2dat.channels import Channel, ChannelState

state = ChannelState()
state.toggle(Channel.BLUE, False)
rgb, alpha = state.apply(rgb_bytes, alpha_bytes)
```

## Command line

Dump any file as hex:

```
gw2dat-hexdump path/to/file
```

## What it does not do

The package does not open, decompress or index `.dat` archives itself, and
it does not identify file types from their bytes.

`scan_entries` works on any object that meets the `DatSource` protocol. That
object must supply these:

- `num_files`
- `peek_file`
- `read_file`
- `identify_file_type`
- `base_id_from_file_num`
- `file_id_from_file_num`

The package has no graphical browser. It does not decode textures or play
sounds.

## Tests

```
pip install .[test]
pytest
```