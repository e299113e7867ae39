#!/usr/bin/env python3
"""
Start the Job Taxonomy Web Server

Usage:
    python start_server.py [--port PORT] [--host HOST]
    python start_server.py --list-jobs
    python start_server.py --resolve CODE

Example:
    python start_server.py --port 8080
    python start_server.py --resolve L
"""

import argparse
import sys

from job_database import get_all_jobs, relevant_stats
from restrictions import describe_restriction, resolve_restriction


def print_jobs():
    """Print the job taxonomy as a table."""
    print(f"{'Job':<5}{'Name':<15}{'Family':<11}{'Armor':<9}Stats")
    print("-" * 60)
    for job in sorted(get_all_jobs(), key=lambda j: j.abbreviation):
        stats = ", ".join(sorted(stat.value for stat in relevant_stats(job)))
        print(f"{job.abbreviation:<5}{job.name:<15}{job.family.value:<11}"
              f"{job.armor.name.lower():<9}{stats}")


def print_restriction(code: str) -> int:
    """Print the jobs eligible for a restriction code. Returns exit status."""
    jobs = resolve_restriction(code)
    if jobs is None:
        print(f"Warning: Unknown restriction code: {code}")
        return 1
    print(f"{code} ({describe_restriction(code)}):")
    print("  " + " ".join(sorted(job.abbreviation for job in jobs)))
    return 0


def main():
    parser = argparse.ArgumentParser(description='Job Taxonomy Web Server')
    parser.add_argument('--port', type=int, default=8000, help='Port to run the server on')
    parser.add_argument('--host', type=str, default='127.0.0.1', help='Host to bind to')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload for development')
    parser.add_argument('--list-jobs', action='store_true', help='Print all jobs and exit')
    parser.add_argument('--resolve', metavar='CODE', help='Print the jobs for a restriction code and exit')
    args = parser.parse_args()

    if args.list_jobs:
        print_jobs()
        return 0
    if args.resolve is not None:
        return print_restriction(args.resolve)

    print("=" * 60)
    print("Job Taxonomy")
    print("=" * 60)
    print()
    print(f"Starting server at http://{args.host}:{args.port}")
    print(f"API Documentation at http://{args.host}:{args.port}/docs")
    print()
    print("Press Ctrl+C to stop the server.")
    print("=" * 60)

    import uvicorn
    uvicorn.run(
        "api:app",
        host=args.host,
        port=args.port,
        reload=args.reload
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
