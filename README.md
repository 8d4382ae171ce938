# hashlabs

This package has three small command-line tools built around hashing. The console messages of the voting and price-table tools are in Russian.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Tools

### Duplicate vote detection (`hashlabs.voting`)

```
hashlabs-voting [FILE]
```

The tool reads surnames from `FILE`, one per line, and skips empty lines. If no file is given, it reads `students.txt` in the current directory. If the file cannot be opened, it prints an error and carries on. Next it asks for surnames on standard input. It stops when you type `end` or when the input ends. Finally it prints a summary and the list of accepted surnames.

Each surname goes through `surname_hash`. This is a 64-bit polynomial hash with base 31, taken over the UTF-8 bytes of the surname. Only ASCII letters are lower-cased before hashing, so "Ivanov" and "IVANOV" collide but Cyrillic case variants do not. If a hash has already been seen, the surname is reported as a duplicate and counted.

From Python:

```python
from hashlabs.voting import VotingSystem, surname_hash

system = VotingSystem()
system.unenrolled("Ivanov")    # True, new voter
system.unenrolled("IVANOV")    # False, reported as a duplicate
system.voted_count             # 1
system.duplicate_count         # 1
system.surnames                # ("Ivanov",)
system.enrolled("students.txt")  # raises OSError if the file cannot be opened
system.print_results()
```

`unenrolled("")` ignores the empty surname and returns `False`.

### Price table (`hashlabs.pricetable`)

```
hashlabs-pricetable
```

This command runs a short fixed demonstration of `HashTable`. It adds four items, looks up one price, removes one item and prints the table size.

`HashTable` maps string keys to float values. It uses separate chaining over a fixed number of buckets; the default is 10. Keys are placed with `string_hash`, a 64-bit polynomial hash with base 31 over the UTF-8 bytes of the key.

```python
from hashlabs.pricetable import HashTable

prices = HashTable()
prices.insert("Nails", 27)
prices.insert("Nails", 28)   # replaces the existing value
prices.find("Nails")         # 28.0
prices.find("Screws")        # None
"Nails" in prices            # True
prices.remove("Nails")       # True
len(prices)                  # 0
prices.is_empty()            # True
```

`HashTable(size)` raises `ValueError` if `size` is less than 1.

### Image digest comparison (`hashlabs.image_digest`)

```
hashlabs-image-digest [IMAGE] [OUTPUT]
```

The tool loads `IMAGE` with Pillow. It applies the EXIF orientation, converts the image to RGB and keeps the pixels in BGR order. It then computes the SHA-256 of the raw pixel bytes. Next it adds one to the blue channel of the top-left pixel, wrapping at 256, and hashes the pixels again. Both digests and whether they match are printed and written to `OUTPUT`. The defaults are `kkk.jpg` and `output.txt`. If the image cannot be loaded or the report cannot be written, the tool prints `Error: ...` and exits with status 1.

```python
from hashlabs.image_digest import ImageHash

digest = ImageHash("picture.png")   # raises ImageHashError if the image cannot be loaded
digest.image.shape                  # (height, width, 3), BGR
before = digest.calculate_sha256()
digest.modify_single_pixel()
after = digest.calculate_sha256()
digest.save_results_to_file("output.txt", before, after, before == after)
```

## What it does not do

The voting tool keeps its results in memory only. Accepted surnames are not saved anywhere, and the summary is only printed.

The price-table command has no options, and it has no way to load or save a price list.