#!/usr/bin/env python3
"""
Import the recording after publishing into b3scale.

Symlink this file into /usr/local/bigbluebutton/core/scripts/post_publish,
or point that directory at the b3scale-post-publish-import console script
of an installed package. A plain copy cannot find the publish_hook
package. The recording pipeline calls it with
--meeting-id <record id> --format <format>.

Usage:
    python post_publish_import.py --meeting-id ID [--format NAME]

Or use the package directly:
    python -m publish_hook.main --meeting-id ID [--format NAME]
"""

import sys
from pathlib import Path

# Add parent directory to path for package imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from publish_hook.main import main

if __name__ == "__main__":
    sys.exit(main())
