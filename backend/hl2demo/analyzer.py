# analyzer.py

import logging
import sys
from typing import Any, Dict

from .parser import DemoParser

logger = logging.getLogger(__name__)


def print_analysis_results(results: Dict[str, Any]) -> None:
    """Print analysis results in a formatted way"""
    header = results['header']

    print("\nDemo Analysis Results")
    print("=" * 50)

    # Header Information
    print("\nHeader Information:")
    print("-" * 20)
    print(f"Map: {header['map_name']}")
    print(f"Server: {header['server_name']}")
    print(f"Client: {header['client_name']}")
    print(f"Game Directory: {header['game_directory']}")
    print(f"Demo Protocol: {header['demo_protocol']}")
    print(f"Network Protocol: {header['network_protocol']}")
    print(f"Duration: {header['playback_time']:.2f}s ({header['playback_ticks']} ticks)")

    # Frame Information
    print("\nFrame Information:")
    print("-" * 20)
    print(f"Total Frames: {results['analysis']['total_frames']}")
    print(f"Payload Bytes: {results['analysis']['total_payload_bytes']}")
    print(f"Trailing Bytes: {results['analysis']['trailing_bytes']}")

    if results['frames']:
        print("\nFirst few frames:")
        for i, frame in enumerate(results['frames']):
            print(f"Frame {i+1}: {frame}")


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    print("\nHL2 Demo Analyzer")
    print("=" * 50)

    if len(sys.argv) != 2:
        print("\nUsage: hl2demo-analyze <demo_file.dem>")
        sys.exit(1)

    demo_path = sys.argv[1]

    try:
        logger.debug(f"Starting analysis of {demo_path}")
        results = DemoParser(demo_path).analyze()
        print_analysis_results(results)

    except Exception as e:
        print(f"\nError analyzing demo: {e}")
        logger.error("Analysis failed", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
