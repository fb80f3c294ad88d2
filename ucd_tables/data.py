"""Fetch and cache the pinned Unicode Character Database files.

The files are downloaded once from unicode.org and kept in a per-version cache
directory; every later run reads them from disk.  Set the `UCD_DATA_DIR`
environment variable to point at a directory that already holds the files.
"""

import os
import os.path
import requests

from ucd_tables.mood import stderr_print


UCD_VERSION = "13.0.0"
UCD_URL = "https://www.unicode.org/Public/{version}/ucd/{filename}"

UNICODE_DATA_TXT = "UnicodeData.txt"
DERIVED_CORE_PROPERTIES_TXT = "DerivedCoreProperties.txt"
CASE_FOLDING_TXT = "CaseFolding.txt"
SPECIAL_CASING_TXT = "SpecialCasing.txt"

UCD_FILES = (
    UNICODE_DATA_TXT,
    DERIVED_CORE_PROPERTIES_TXT,
    CASE_FOLDING_TXT,
    SPECIAL_CASING_TXT,
)

DATA_DIR_ENV = "UCD_DATA_DIR"

REQUEST_TIMEOUT = 60


def default_data_dir():
    data_dir = os.environ.get(DATA_DIR_ENV)
    if data_dir:
        return data_dir
    return os.path.join(os.path.expanduser("~"), ".cache", "ucd_tables",
            UCD_VERSION)


def ucd_url(filename, version=UCD_VERSION):
    return UCD_URL.format(version=version, filename=filename)


def download_text(url, mood_print=stderr_print):
    mood_print("Loading {}… ".format(url), end="", flush=True)
    response = requests.get(url, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    mood_print("Completed.")
    return response.content.decode("utf-8")


def load_text(filename, data_dir=None, mood_print=stderr_print):
    """Return the text of one of the UCD_FILES, downloading it if needed."""
    if filename not in UCD_FILES:
        raise ValueError("not a Unicode data file: {!r}".format(filename))
    if data_dir is None:
        data_dir = default_data_dir()

    path = os.path.join(data_dir, filename)
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as file:
            return file.read()

    text = download_text(ucd_url(filename), mood_print)
    os.makedirs(data_dir, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as file:
        file.write(text)
    mood_print("Saved {} to {}.".format(filename, os.path.abspath(data_dir)))
    return text
