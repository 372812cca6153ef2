# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Generate UTF-16 and byte-order-mark variants of UTF-8 test documents.

Every file of the source directory is written to::

    <dest>/utf-8_bom/      UTF-8 with BOM
    <dest>/utf-16be/       UTF-16BE, no BOM
    <dest>/utf-16be_bom/   UTF-16BE with BOM
    <dest>/utf-16le/       UTF-16LE, no BOM
    <dest>/utf-16le_bom/   UTF-16LE with BOM
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Union

from .parsers.charset import BOM_UTF8, BOM_UTF16_BE, BOM_UTF16_LE, UTF16_BE, UTF16_LE
from .utils.logging_utils import configure_split_stream_logging

logger = logging.getLogger(__name__)

# directory name -> (bom, encoding)
VARIANTS = {
    'utf-8_bom': (BOM_UTF8, None),
    'utf-16be': (b'', UTF16_BE),
    'utf-16be_bom': (BOM_UTF16_BE, UTF16_BE),
    'utf-16le': (b'', UTF16_LE),
    'utf-16le_bom': (BOM_UTF16_LE, UTF16_LE),
}


def transcode(content: bytes, bom: bytes, encoding: Optional[str]) -> bytes:
    if encoding is not None:
        content = content.decode('utf-8').encode(encoding)
    return bom + content


def generate_variants(source_dir: Union[str, Path], dest_dir: Union[str, Path]) -> Dict[str, List[Path]]:
    """Write every variant of every file in ``source_dir`` below ``dest_dir``.

    Returns:
        Mapping of variant directory name to the files written there
    """
    source_dir = Path(source_dir)
    dest_dir = Path(dest_dir)
    sources = sorted(p for p in source_dir.iterdir() if p.is_file())

    written: Dict[str, List[Path]] = {}
    for name, (bom, encoding) in VARIANTS.items():
        variant_dir = dest_dir / name
        variant_dir.mkdir(parents=True, exist_ok=True)
        written[name] = []
        for source in sources:
            target = variant_dir / source.name
            target.write_bytes(transcode(source.read_bytes(), bom, encoding))
            written[name].append(target)
        logger.info(f"Wrote {len(sources)} files to {variant_dir}")
    return written


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Clone UTF-8 test documents into UTF-16 and BOM variants')
    parser.add_argument('source', help='directory of UTF-8 documents')
    parser.add_argument('dest', help='directory receiving one sub-directory per variant')
    args = parser.parse_args(argv)

    configure_split_stream_logging(level=logging.INFO, formatter=logging.Formatter('%(message)s'))
    generate_variants(args.source, args.dest)
    return 0


if __name__ == '__main__':
    sys.exit(main())
