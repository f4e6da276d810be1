# src/uniqopy/config.py

VERSION = "0.2.0"

# Local wall-clock time, e.g. 2022-01-10-07:06:49
TIMESTAMP_FORMAT = "%Y-%m-%d-%H:%M:%S"

USAGE = """
usage: uniqopy <file>
       uniqopy -- <file>   (for names starting with "-")

Create a copy of a file incorporating its MD5 hash and the current
local timestamp into the new file's name. The file's extension will
be retained.

Examples:
    example -> example.2022-02-02-22:22:22.d41d8cd98f00b204e9800998ecf8427e
    example.txt -> example.2022-02-02-22:22:22.d41d8cd98f00b204e9800998ecf8427e.txt
"""

# Process exit codes
EXIT_USAGE = 1
EXIT_READ = 2
EXIT_NOT_A_FILE = 3
EXIT_WRITE = 4
