"""
Output formatting module.

This module writes enriched listings as CSV, as a plain event list JSON
document, or as a GeoJSON FeatureCollection, and reads the JSON formats
back.
"""

import csv
import json
import logging
import os
from typing import Any, Dict, Iterable, List

from ..constants import APPENDED_COLUMNS, JSON_INDENT
from ..models import EnrichedEvent

logger = logging.getLogger(__name__)


def _ensure_parent_dir(output_path: str) -> None:
    output_dir = os.path.dirname(output_path)
    if output_dir and not os.path.exists(output_dir):
        os.makedirs(output_dir, exist_ok=True)


def csv_output_header(header: List[str]) -> List[str]:
    """Original header followed by the appended coordinate columns."""
    return list(header) + APPENDED_COLUMNS


def write_csv_output(
    header: List[str],
    records: Iterable[List[str]],
    output_path: str,
) -> int:
    """
    Write enriched rows to a CSV file.

    ``records`` is consumed lazily and every row is flushed as soon as it
    is written, so a run that fails part way leaves the rows written so far.

    Args:
        header: Column names from the input file
        records: Rows already extended with the appended columns
        output_path: Path to the output CSV file

    Returns:
        Number of data rows written
    """
    written = 0
    try:
        _ensure_parent_dir(output_path)
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(csv_output_header(header))
            for record in records:
                writer.writerow(record)
                f.flush()
                written += 1

        logger.info(f"Successfully wrote {written} rows to {output_path}")
        return written

    except OSError as e:
        logger.error(f"Failed to write CSV output to {output_path} after {written} rows: {e}")
        raise


def build_feature(event: EnrichedEvent, feature_id: int) -> Dict[str, Any]:
    """Create a GeoJSON Point feature whose geometry matches the event location."""
    return {
        "id": feature_id,
        "type": "Feature",
        "geometry": {
            "type": "Point",
            "coordinates": event.coordinates,
        },
        "properties": event.to_dict(),
    }


def build_feature_collection(events: Iterable[EnrichedEvent]) -> Dict[str, Any]:
    """Wrap events in a FeatureCollection, numbering features from 1 in order."""
    return {
        "type": "FeatureCollection",
        "features": [
            build_feature(event, feature_id)
            for feature_id, event in enumerate(events, 1)
        ],
    }


def write_geojson_output(events: List[EnrichedEvent], output_path: str) -> int:
    """
    Write events as a pretty-printed GeoJSON FeatureCollection.

    Args:
        events: Enriched events in input order
        output_path: Path to the output GeoJSON file

    Returns:
        Number of features written
    """
    collection = build_feature_collection(events)
    _write_json(collection, output_path)
    logger.info(f"Successfully wrote {len(collection['features'])} features to {output_path}")
    return len(collection["features"])


def read_geojson(input_path: str) -> Dict[str, Any]:
    """
    Read a GeoJSON FeatureCollection.

    Raises:
        ValueError: If the document is not a FeatureCollection
    """
    with open(input_path, "r", encoding="utf-8") as f:
        document = json.load(f)

    if not isinstance(document, dict) or document.get("type") != "FeatureCollection":
        raise ValueError(f"Not a GeoJSON FeatureCollection: {input_path}")
    return document


def events_from_feature_collection(collection: Dict[str, Any]) -> List[EnrichedEvent]:
    """Decode the events stored in a FeatureCollection's feature properties."""
    return [
        EnrichedEvent.from_dict(feature.get("properties") or {})
        for feature in collection.get("features") or []
    ]


def write_events_json(events: List[EnrichedEvent], output_path: str) -> int:
    """Write events as a pretty-printed JSON list."""
    _write_json([event.to_dict() for event in events], output_path)
    logger.info(f"Successfully wrote {len(events)} events to {output_path}")
    return len(events)


def read_events_json(input_path: str) -> List[EnrichedEvent]:
    """
    Read an event list written by write_events_json.

    Raises:
        ValueError: If the document is not a JSON list
    """
    with open(input_path, "r", encoding="utf-8") as f:
        document = json.load(f)

    if not isinstance(document, list):
        raise ValueError(f"Expected a JSON list of events: {input_path}")
    return [EnrichedEvent.from_dict(item) for item in document]


def _write_json(document: Any, output_path: str) -> None:
    try:
        _ensure_parent_dir(output_path)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=JSON_INDENT, ensure_ascii=False)
            f.write("\n")
    except OSError as e:
        logger.error(f"Failed to write JSON output to {output_path}: {e}")
        raise
