import numpy as np
import pandas as pd
from typing import List


class Entry:
    def __init__(self, id_, priority, label=""):
        self.id = id_
        self.priority = priority
        self.label = label

    def __repr__(self):
        return f"Entry(id={self.id}, priority={self.priority}, label={self.label!r})"


def get_priority(entry: Entry):
    return entry.priority

# Generate Random Entries
def generate_random_entries(drain_params, random_generator: np.random.Generator) -> List[Entry]:
    entries = []
    for i in range(drain_params.n_entries):
        priority = round(drain_params.average_priority + drain_params.priority_spread * random_generator.normal(0, 1), 3)
        entries.append(Entry(id_=i, priority=float(priority), label=f"e{i}"))
    return entries

# Generate Entries from File
def generate_entries(entries_filename: str) -> List[Entry]:
    """Reads entries from a CSV file with `id`, `priority` and optional `label` columns."""
    try:
        entries_df = pd.read_csv(entries_filename)
    except FileNotFoundError:
        raise RuntimeError(f"File '{entries_filename}' not found. Please ensure it exists or generate entries instead.")
    except pd.errors.ParserError as pe:
        raise RuntimeError(f"Error parsing entries file '{entries_filename}': {pe}")
    except pd.errors.EmptyDataError:
        raise RuntimeError(f"Entries file '{entries_filename}' is empty.")

    missing = [column for column in ("id", "priority") if column not in entries_df.columns]
    if missing:
        raise RuntimeError(f"Entries file '{entries_filename}' is missing columns: {', '.join(missing)}")

    entries = []
    for index, row in entries_df.iterrows():
        if pd.isna(row["id"]) or pd.isna(row["priority"]):
            raise RuntimeError(f"Error parsing entries file '{entries_filename}': row {index} has a blank id or priority")
        label = row["label"] if "label" in entries_df.columns and not pd.isna(row["label"]) else ""
        try:
            entries.append(Entry(id_=int(row["id"]), priority=float(row["priority"]), label=str(label)))
        except ValueError as ve:
            raise RuntimeError(f"Error parsing entries file '{entries_filename}': {ve}")
    return entries


# Initialize Entries
def initialize_entries(drain_params, random_generator: np.random.Generator) -> List[Entry]:
    if drain_params.entries_from_file:
        return generate_entries(drain_params.entries_filename)
    return generate_random_entries(drain_params, random_generator)
