# parser.py

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .demo import Demo, decode_or_raise
from .header import DemoHeader, decode_header
from .reader import DemoReader

logger = logging.getLogger(__name__)


class DemoParser:
    """Reads an HL2DEMO file from disk and decodes it"""

    PREVIEW_FRAMES = 5

    def __init__(self, demo_path: Union[str, Path]):
        path = Path(demo_path)
        if not path.exists():
            raise FileNotFoundError(f"Demo file not found: {path}")
        self.demo_path = path
        self.demo: Optional[Demo] = None
        self.trailing_bytes = 0
        logger.debug(f"Initialized parser for {path}")

    def parse_header(self) -> DemoHeader:
        """Decode only the fixed-size header"""
        with self.demo_path.open('rb') as f:
            header_data = f.read(DemoHeader.HEADER_SIZE)
        return decode_header(DemoReader(header_data))

    def parse(self) -> Demo:
        """Decode the whole file"""
        data = self.demo_path.read_bytes()
        logger.info(f"Parsing {self.demo_path} ({len(data)} bytes)")

        try:
            demo, remaining = decode_or_raise(data)
        except Exception as e:
            logger.error(f"Error parsing demo {self.demo_path}: {e}")
            raise

        self.demo = demo
        self.trailing_bytes = len(remaining)
        logger.debug(f"Parsed header:\n{demo.header}")
        logger.info(f"Parsed {demo.frame_count} frames from demo")
        return demo

    def analyze(self) -> Dict[str, Any]:
        """Parse the demo and summarize it"""
        demo = self.demo or self.parse()

        return {
            "header": demo.header.to_dict(),
            "frames": [frame.to_dict() for frame in demo.frames[:self.PREVIEW_FRAMES]],
            "analysis": {
                "map": demo.header.map_name,
                "server": demo.header.server_name,
                "total_frames": demo.frame_count,
                "total_payload_bytes": demo.total_payload_bytes,
                "trailing_bytes": self.trailing_bytes,
            },
        }
