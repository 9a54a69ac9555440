"""
Command line front-end: one subcommand per Telraam endpoint

Examples:
  telraam -t $TOKEN welcome
  telraam traffic --id 348917 --time-start "2020-10-30 07:00:00Z" --time-end "2020-10-30 09:00:00Z"
  telraam cameras-by-segment 348917
"""
import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from pydantic import BaseModel, ValidationError

from telraam import __version__
from telraam.clients.telraam_api import TelraamClient
from telraam.config import get_settings
from telraam.endpoints import (
    AllAvailableCameras,
    AllSegments,
    CameraByMacId,
    CamerasBySegmentId,
    Endpoint,
    LiveTrafficSnapshot,
    SegmentById,
    Traffic,
    Welcome,
)
from telraam.errors import TelraamError
from telraam.models.codecs import parse_rfc3339_weak
from telraam.models.request import TrafficLevel, TrafficRequest

logger = logging.getLogger(__name__)


def rfc3339(value: str):
    """argparse type for timestamps such as 2020-10-30 07:00:00Z"""
    try:
        return parse_rfc3339_weak(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid RFC3339 timestamp: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="telraam",
        description="Telraam API CLI for collecting data from the Telraam traffic cameras",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:" + __doc__.split("Examples:", 1)[1],
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-t", "--token",
        default=None,
        metavar="TOKEN",
        help="Telraam API token (default: $TELRAAM_TOKEN)",
    )
    parser.add_argument("--base-url", default=None, help="API host (default: https://telraam-api.net)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    commands.add_parser("welcome", help="Check that the Telraam API is up")

    traffic = commands.add_parser("traffic", help="Traffic statistics for a segment or instance")
    traffic.add_argument(
        "--level",
        choices=[level.value for level in TrafficLevel],
        default=TrafficLevel.SEGMENTS.value,
        help="Aggregate per segment or per camera instance (default: segments)",
    )
    traffic.add_argument("--format", default="per-hour", help="Aggregation format (default: per-hour)")
    traffic.add_argument("--id", required=True, help="Segment or instance identifier")
    traffic.add_argument("--time-start", required=True, type=rfc3339, help="Start of the interval (UTC)")
    traffic.add_argument("--time-end", required=True, type=rfc3339, help="End of the interval, excluded (UTC)")

    commands.add_parser("traffic-snapshot-live", help="Live traffic snapshot as GeoJSON")
    commands.add_parser("cameras", help="All camera instances")

    by_segment = commands.add_parser("cameras-by-segment", help="Camera instances on a segment")
    by_segment.add_argument("segment_id")

    by_mac = commands.add_parser("camera-by-mac", help="Camera instances of a device")
    by_mac.add_argument("mac_id")

    commands.add_parser("segments", help="All road segments as GeoJSON")

    segment = commands.add_parser("segment-by-id", help="One road segment as GeoJSON")
    segment.add_argument("segment_id")

    return parser


def endpoint_from_args(args: argparse.Namespace) -> Endpoint:
    """Map the parsed subcommand onto its endpoint descriptor"""
    if args.command == "welcome":
        return Welcome()
    if args.command == "traffic":
        request = TrafficRequest(
            level=TrafficLevel(args.level),
            format=args.format,
            id=args.id,
            time_start=args.time_start,
            time_end=args.time_end,
        )
        return Traffic(request=request)
    if args.command == "traffic-snapshot-live":
        return LiveTrafficSnapshot()
    if args.command == "cameras":
        return AllAvailableCameras()
    if args.command == "cameras-by-segment":
        return CamerasBySegmentId(segment_id=args.segment_id)
    if args.command == "camera-by-mac":
        return CameraByMacId(mac_id=args.mac_id)
    if args.command == "segments":
        return AllSegments()
    if args.command == "segment-by-id":
        return SegmentById(segment_id=args.segment_id)
    raise ValueError(f"unknown command: {args.command}")


def to_jsonable(payload: Any) -> Any:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json")
    if isinstance(payload, (list, tuple)):
        return [to_jsonable(item) for item in payload]
    return payload


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    token = args.token or settings.token
    if not token:
        parser.error("an API token is required: pass -t/--token or set TELRAAM_TOKEN")

    try:
        endpoint = endpoint_from_args(args)
    except ValidationError as e:
        parser.error(str(e))

    try:
        with TelraamClient(token, base_url=args.base_url) as client:
            response = client.send(endpoint)
            payload = response.take()
    except TelraamError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(to_jsonable(payload), indent=2))
    return 0
