"""JSON-LD emitter: schema fragments to <script> blocks for the document head."""

import json
import logging
from typing import Iterable, Optional

from jinja2 import Environment

from schema_markup.models import SchemaFragment

logger = logging.getLogger(__name__)

SCRIPT_TEMPLATE = '<script type="application/ld+json">{{ payload }}</script>'
PRETTY_SCRIPT_TEMPLATE = '<script type="application/ld+json">\n{{ payload }}\n</script>'


class JsonLdEmitter:
    """Serializes schema fragments into standalone JSON-LD script blocks.

    Slashes and non-ASCII characters are written as-is, with one exception:
    the sequence "</" is written as "<\\/" so that catalog text cannot close
    the script element. Both decode to the same JSON string. Keys keep the
    order the builders inserted them in, so output is stable across runs.
    """

    def __init__(self, pretty: bool = False):
        """
        Args:
            pretty: Indent JSON by two spaces instead of compact output
        """
        self.pretty = pretty
        # Payload is JSON, not HTML; autoescaping would corrupt the quotes
        env = Environment(autoescape=False)
        self._template = env.from_string(
            PRETTY_SCRIPT_TEMPLATE if pretty else SCRIPT_TEMPLATE
        )

    def serialize(self, fragment: SchemaFragment) -> str:
        """Serialize one fragment to a JSON string."""
        if self.pretty:
            text = json.dumps(fragment, ensure_ascii=False, indent=2)
        else:
            text = json.dumps(fragment, ensure_ascii=False, separators=(",", ":"))
        # "</" would end the script element early; "<\/" is the same JSON string
        return text.replace("</", "<\\/")

    def render_script(self, fragment: SchemaFragment) -> str:
        """Render one fragment as a <script type="application/ld+json"> block."""
        return self._template.render(payload=self.serialize(fragment))

    def render(self, fragments: Iterable[Optional[SchemaFragment]]) -> str:
        """Render fragments in order, one script block per line.

        Fragments that are None or cannot be serialized are left out.
        """
        blocks = []
        for fragment in fragments:
            if not fragment:
                continue
            try:
                blocks.append(self.render_script(fragment))
            except (TypeError, ValueError) as e:
                logger.warning(f"Dropping {fragment.get('@type', 'unknown')} fragment: {e}")
        return "\n".join(blocks)
