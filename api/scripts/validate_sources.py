#!/usr/bin/env python3
"""
Validate the configured verb source tables.

Loads every source in precedence order without aborting on the first bad
record, then prints:
- merge replacements (lemmas authored in more than one table)
- structural load errors (verbs that cannot be conjugated)
- tú/vos accepts symmetry violations and duplicated tuples

Exits with status 1 if any verb failed to load.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path to import conjugador modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from conjugador.core.config import settings
from conjugador.core.exceptions import ConjugadorException
from conjugador.services.integrity_service import audit_store
from conjugador.services.merge_service import merge_tables
from conjugador.services.source_service import load_source_dir
from conjugador.services.store_service import build_store


def main() -> int:
    logging.basicConfig(level=logging.WARNING)

    print(f"Sources: {', '.join(settings.source_order)}")
    print(f"Directory: {settings.source_dir}\n")

    try:
        tables = load_source_dir(settings.source_dir, settings.source_order)
        merged = merge_tables(tables)
    except ConjugadorException as e:
        print(f"❌ {e}")
        return 1

    store = build_store(merged, strict=False, strict_accepts_symmetry=settings.strict_accepts_symmetry)
    report = audit_store(store)

    print(f"Verbs: {report.verb_count}  Forms: {report.form_count}")
    for region, count in report.region_coverage.items():
        print(f"  {region.value}: {count} verb(s)")

    if merged.replacements:
        print(f"\nReplaced lemmas ({len(merged.replacements)}):")
        for lemma, names in merged.replacements.items():
            print(f"  {lemma}: {' -> '.join(names)}")

    if report.accepts_violations:
        print(f"\n⚠️  Accepts symmetry violations ({len(report.accepts_violations)}):")
        for violation in report.accepts_violations:
            print(f"  {violation.lemma}: {violation}")

    if report.duplicates:
        print(f"\n⚠️  Duplicated tuples ({len(report.duplicates)}):")
        for duplicate in report.duplicates:
            marker = " (conflicting)" if duplicate.conflicting else ""
            print(f"  {duplicate.lemma}: {duplicate}{marker}")

    if report.load_errors:
        print(f"\n❌ Load errors ({len(report.load_errors)}):")
        for error in report.load_errors:
            print(f"  {error}")
        return 1

    print("\n✅ All verbs loaded")
    return 0


if __name__ == "__main__":
    sys.exit(main())
