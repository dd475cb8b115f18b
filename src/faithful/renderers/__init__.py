"""faithful renderers.

Renderers convert token trees back into source text.

Available Renderers:
- FaithfulRenderer: Writes a token tree into a sink, reconciling whitespace
  from recorded spans
- FaithfulDisplay: Lazy display object rendering through a StringBuilder

Thread Safety:
Renderers are local to each render call.
Token trees are immutable and safe to share between concurrent renders.

"""

from faithful.renderers.display import FaithfulDisplay
from faithful.renderers.faithful import FaithfulRenderer

__all__ = ["FaithfulDisplay", "FaithfulRenderer"]
