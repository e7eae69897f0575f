"""Create the attendance store.

Usage:
    python scripts/init_db.py            # apply database/schema.sql to DB_CONFIG
    python scripts/init_db.py --dry-run  # only print the statements that would run
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.geo_attendance.geo_attendance.database.bootstrap import (
    DEFAULT_SCHEMA_PATH,
    apply_schema,
    missing_tables,
    schema_statements,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--schema", type=Path, default=DEFAULT_SCHEMA_PATH)
    parser.add_argument("--dry-run", action="store_true")
    args = parser.parse_args(argv)

    if args.dry_run:
        for stmt in schema_statements(args.schema):
            print(stmt + ";\n")
        return 0

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    target = f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"

    apply_schema(db_config, schema_path=args.schema)
    missing = missing_tables(db_config)
    if missing:
        print(f"FAILED: {target} is missing tables: {', '.join(missing)}")
        return 1

    print(f"OK: attendance store ready at {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
