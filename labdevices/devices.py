"""Device records: loading from CSV, normalising fields and searching."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

DEFAULT_MAX_DEVICES = 100


def _format_cost(cost: float) -> str:
    """Render a cost the way a default-formatted floating point value prints."""
    return f"{cost:g}"


@dataclass
class Device:
    """A lab device as stored in the inventory file."""

    name: str
    date: str
    device_id: str
    category: str
    cost: float

    def describe(self) -> str:
        """One-line summary of every field of the device."""
        return (
            f"Name: {self.name}, Date: {self.date}, ID: {self.device_id}, "
            f"Category: {self.category}, Cost: {_format_cost(self.cost)}"
        )


def standardize_date(date: str) -> str:
    """Pad single-digit day and month of a d/m/yyyy date with a leading zero."""
    if len(date) > 1 and date[1] == "/":
        date = "0" + date
    if len(date) > 4 and date[4] == "/":
        date = date[:3] + "0" + date[3:]
    return date


def _capitalize_word(word: str) -> str:
    return word[0].upper() + word[1:].lower()


def standardize_name(name: str) -> str:
    """Collapse whitespace and capitalise each word of a name."""
    return " ".join(_capitalize_word(word) for word in name.split())


def _parse_line(line: str) -> Device:
    fields = line.split(",")
    fields += [""] * (5 - len(fields))
    name, date, device_id, category, cost_text = fields[:5]
    try:
        cost = float(cost_text.strip())
    except ValueError:
        raise ValueError(f"invalid cost value: {cost_text!r}") from None
    return Device(name, date, device_id, category, cost)


def read_csv(path: str | Path, max_size: int = DEFAULT_MAX_DEVICES) -> list[Device]:
    """Read at most ``max_size`` devices from a CSV file whose first line is a header.

    Raises OSError if the file cannot be opened and ValueError on a bad cost.
    """
    devices: list[Device] = []
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for line in handle:
            if len(devices) >= max_size:
                break
            devices.append(_parse_line(line.rstrip("\r\n")))
    return devices


def find_by_name(devices: Iterable[Device], name: str) -> list[Device]:
    """Devices whose name equals ``name`` exactly."""
    return [device for device in devices if device.name == name]


def find_by_id(devices: Iterable[Device], device_id: str) -> list[Device]:
    """Devices whose ID equals ``device_id`` exactly."""
    return [device for device in devices if device.device_id == device_id]


def find_by_cost(devices: Iterable[Device], cost: float) -> list[Device]:
    """Devices whose cost equals ``cost``."""
    return [device for device in devices if device.cost == cost]


def find_by_category(devices: Iterable[Device], category: str) -> list[Device]:
    """Devices whose category equals ``category`` exactly."""
    return [device for device in devices if device.category == category]