"""
Registry of available examples.
"""
from typing import List, TypedDict

class ExampleMetadata(TypedDict):
    path: str
    extras: List[str]
    tags: List[str]
    experimental: bool
    optional_deps: List[str]
    description: str

EXAMPLES: List[ExampleMetadata] = [
    # --- Basic ---
    {
        "path": "basic/01_describe_table.py",
        "extras": ["core"],
        "tags": ["basic", "p0"],
        "experimental": False,
        "optional_deps": [],
        "description": "Loads a table, drops incomplete rows and describes each numeric column."
    },
    {
        "path": "basic/02_partition_and_join.py",
        "extras": ["core"],
        "tags": ["basic", "p0"],
        "experimental": False,
        "optional_deps": [],
        "description": "Partitions rows by a bucketed field and joins a second table by id."
    },
    {
        "path": "basic/03_correlation_and_regression.py",
        "extras": ["core", "plot"],
        "tags": ["basic", "stats"],
        "experimental": False,
        "optional_deps": ["matplotlib"],
        "description": "Filtered correlation matrix, linear fit, slope test and optional scatter plot."
    },
]
