#!/usr/bin/env python
"""
Command line print job submission.

    python main.py --printer 123 --file invoices/42.pdf --copies 12 --paper A4
"""
import argparse
import json
import logging
import sys

import requests

from printing.backend_client import BackendClient
from printing.config import settings
from printing.errors import PrintJobError
from printing.print_job import PrintJob

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Submit a print job to the print backend")
    parser.add_argument("--printer", required=True, help="Printer id")

    content = parser.add_mutually_exclusive_group(required=True)
    content.add_argument("--file", help="Path of the document on the storage disk")
    content.add_argument("--uri", help="URI the backend downloads the document from")

    parser.add_argument("--disk", default="local", help="Storage disk holding --file")
    parser.add_argument("--raw", action="store_true", help="Send as raw printer data instead of PDF")
    parser.add_argument("--copies", type=int)
    parser.add_argument("--qty", type=int, help="Number of times the job is sent to the printer")
    parser.add_argument("--paper")
    parser.add_argument("--media")
    parser.add_argument("--dpi")
    parser.add_argument("--color", action="store_true")
    parser.add_argument("--source", default="print-cli")
    parser.add_argument("--expire-after", type=int, help="Seconds before the backend drops the job")
    parser.add_argument("--username", help="Username for --uri")
    parser.add_argument("--password", help="Password for --uri")
    parser.add_argument("--digest", action="store_true", help="Use digest instead of basic auth for --uri")
    return parser.parse_args(argv)


def build_job(args, client=None, directory=None, storage=None) -> PrintJob:
    job = PrintJob(client=client, directory=directory, storage=storage)

    if args.file:
        job.set_file(args.file, disk=args.disk, raw=args.raw)
    else:
        job.set_uri(args.uri, raw=args.raw)
        if args.username is not None or args.password is not None:
            credentials = {k: v for k, v in (("username", args.username), ("password", args.password)) if v is not None}
            job.set_authentication(credentials, basic=not args.digest)

    options = {key: getattr(args, key) for key in ("paper", "media", "dpi") if getattr(args, key) is not None}
    if args.color:
        options["color"] = True
    job.set_options(options)

    job.set_source(args.source)
    if args.copies is not None:
        job.set_copies(args.copies)
    if args.qty is not None:
        job.set_quantity(args.qty)
    if args.expire_after is not None:
        job.set_expire_after(args.expire_after)

    return job


def main(argv=None, client=None, directory=None, storage=None) -> int:
    logging.basicConfig(level=settings.log_level)
    args = parse_args(argv)

    if client is None:
        client = BackendClient.from_settings()

    try:
        job = build_job(args, client=client, directory=directory, storage=storage)
        response = job.print(args.printer)
    except PrintJobError as e:
        print(f"Print job rejected ({e.code}): {e}", file=sys.stderr)
        return 1
    except requests.RequestException as e:
        print(f"Backend request failed: {e}", file=sys.stderr)
        return 1

    print(json.dumps(response))

    if job.overflow_job is not None:
        print(
            "Overflow job was NOT submitted, send it separately:\n"
            + json.dumps(job.overflow_job.to_dict()),
            file=sys.stderr,
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
