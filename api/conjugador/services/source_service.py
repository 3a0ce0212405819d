"""
Source service for reading raw verb tables from disk.

This is the only place the engine performs I/O. Files are JSON, either a
bare list of verb records or ``{"name": ..., "verbs": [...]}``. Records in
the older "common verbs" shape (a ``forms`` mapping keyed by tense, no
paradigms) are converted to the canonical paradigm shape on load.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from conjugador.core.exceptions import SourceNotFoundError, ValidationError
from conjugador.models.enums import Region, Tense, mood_for_tense
from conjugador.schemas.source import RawVerbTable

logger = logging.getLogger(__name__)

ALL_REGIONS = [region.value for region in Region]

# Tense keys used by the legacy shape that differ from the enum values
_LEGACY_TENSE_KEYS = {
    'pp': 'part',
    'subjPretPerf': 'subjPerf',
}


def is_legacy_record(record: Dict[str, Any]) -> bool:
    """A legacy record keeps its forms in a tense-keyed mapping instead of paradigms."""
    return isinstance(record.get('forms'), dict) and 'paradigms' not in record


def legacy_record_to_raw(record: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convert a legacy tense-keyed record to the canonical paradigm shape.

    The result has one paradigm valid for every region. String-valued tenses
    become nonfinite forms; a 2s_tu/2s_vos pair in the same tense is linked
    through ``accepts`` in both directions.

    Args:
        record: Legacy record ({lemma, type, forms: {tense: {person: value} | value}})

    Returns:
        Record in the canonical shape
    """
    forms: List[Dict[str, Any]] = []

    for tense_key, cell in record.get('forms', {}).items():
        tense_value = _LEGACY_TENSE_KEYS.get(tense_key, tense_key)
        try:
            mood = mood_for_tense(Tense(tense_value)).value
        except ValueError:
            # Leave the mood empty; record validation reports the bad tense
            mood = None

        if isinstance(cell, str):
            forms.append({'mood': mood, 'tense': tense_value, 'person': 'inv', 'value': cell})
            continue

        if not isinstance(cell, dict):
            forms.append({'mood': mood, 'tense': tense_value, 'person': None, 'value': cell})
            continue

        tu_value = cell.get('2s_tu')
        vos_value = cell.get('2s_vos')
        for person, value in cell.items():
            form: Dict[str, Any] = {'mood': mood, 'tense': tense_value, 'person': person, 'value': value}
            if tu_value and vos_value:
                if person == '2s_tu':
                    form['accepts'] = {'vos': vos_value}
                elif person == '2s_vos':
                    form['accepts'] = {'tu': tu_value}
            forms.append(form)

    converted = {
        'id': record.get('id') or record.get('lemma'),
        'lemma': record.get('lemma'),
        'type': record.get('type', 'regular'),
        'paradigms': [{'regionTags': list(ALL_REGIONS), 'forms': forms}] if forms else [],
    }
    return converted


def table_from_records(name: str, records: Sequence[Dict[str, Any]]) -> RawVerbTable:
    """Build a RawVerbTable, converting legacy records to the canonical shape."""
    verbs = []
    legacy_count = 0
    for record in records:
        if not isinstance(record, dict):
            raise ValidationError(f"Source '{name}' contains a non-object verb record: {record!r}")
        if is_legacy_record(record):
            verbs.append(legacy_record_to_raw(record))
            legacy_count += 1
        else:
            verbs.append(record)

    if legacy_count:
        logger.info(f"Converted {legacy_count} legacy record(s) in source '{name}'")
    return RawVerbTable(name=name, verbs=verbs)


def load_source_file(path: Union[str, Path], name: Optional[str] = None) -> RawVerbTable:
    """
    Load one source table from a JSON file.

    Args:
        path: Path to the JSON file
        name: Optional table name (defaults to the file's "name" key, then its stem)

    Returns:
        RawVerbTable with the file's records

    Raises:
        SourceNotFoundError: If the file does not exist
        ValidationError: If the file is not valid JSON or has the wrong shape
    """
    path = Path(path)
    if not path.is_file():
        raise SourceNotFoundError(f"Source table not found: {path}")

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Source table {path} is not valid JSON: {e}") from e

    if isinstance(data, list):
        records = data
        table_name = name or path.stem
    elif isinstance(data, dict) and isinstance(data.get('verbs'), list):
        records = data['verbs']
        table_name = name or data.get('name') or path.stem
    else:
        raise ValidationError(
            f"Source table {path} must be a list of verbs or an object with a 'verbs' list"
        )

    table = table_from_records(table_name, records)
    logger.info(f"Loaded source '{table.name}' with {len(table)} verb record(s) from {path}")
    return table


def load_source_dir(directory: Union[str, Path], order: Sequence[str]) -> List[RawVerbTable]:
    """
    Load named source tables from a directory in precedence order.

    Args:
        directory: Directory holding ``<name>.json`` files
        order: Table names, lowest precedence first

    Returns:
        Tables in the same order as ``order``
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise SourceNotFoundError(f"Source directory not found: {directory}")
    if not order:
        raise ValidationError("At least one source table name is required")

    return [load_source_file(directory / f"{name}.json", name=name) for name in order]
