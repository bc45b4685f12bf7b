#!/usr/bin/env python3
"""
Remove stale debug artifacts and log files.

Usage:
    python scripts/cleanup_data.py [--dry-run] [--debug-days N] [--logs-days N]
"""

import argparse

from paste2resume.utils.paths import DEBUG_DIR, LOGS_DIR, cleanup_old_data, find_old_files


def report(directory, days, name):
    """Print what a cleanup of one directory would remove."""
    print(f"\n📁 Checking {name} in {directory}")
    old_files = find_old_files(directory, days)

    if not old_files:
        print("   ✅ Nothing older than the retention window")
        return 0, 0

    print(f"   Would delete {len(old_files)} file(s):")
    for file_path, size in old_files[:5]:
        print(f"     - {file_path.name} ({size:,} bytes)")
    if len(old_files) > 5:
        print(f"     ... and {len(old_files) - 5} more")

    return len(old_files), sum(size for _, size in old_files)


def main():
    """Run data cleanup."""
    parser = argparse.ArgumentParser(description="Clean up old resume debug data")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be deleted without actually deleting"
    )
    parser.add_argument(
        "--debug-days",
        type=int,
        default=7,
        help="Keep debug artifacts for this many days (default: 7)"
    )
    parser.add_argument(
        "--logs-days",
        type=int,
        default=90,
        help="Keep logs for this many days (default: 90)"
    )
    args = parser.parse_args()

    print("=" * 70)
    print("🧹 Data Cleanup" + (" (dry run)" if args.dry_run else ""))
    print("=" * 70)
    print(f"  Debug artifacts: {args.debug_days} days")
    print(f"  Log files: {args.logs_days} days")

    if args.dry_run:
        total_files = total_size = 0
        for directory, days, name in ((DEBUG_DIR, args.debug_days, "debug artifacts"),
                                      (LOGS_DIR, args.logs_days, "logs")):
            count, size = report(directory, days, name)
            total_files += count
            total_size += size

        if total_files:
            print(f"\n📊 {total_files} file(s), {total_size / 1024 / 1024:.2f} MB would be freed")
            print("💡 Run without --dry-run to delete them")
        else:
            print("\n✅ No files need to be cleaned up")
    else:
        removed = cleanup_old_data(debug_days=args.debug_days, logs_days=args.logs_days)
        print(f"\n✅ Cleanup complete! Removed {removed} file(s)")

    print("\n" + "=" * 70)


if __name__ == "__main__":
    main()
