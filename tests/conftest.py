from io import StringIO

import pytest

from arith.core import RuntimeContext
from arith.writer import IndentingWriter


@pytest.fixture
def debug_context() -> RuntimeContext:
    return RuntimeContext(writer=IndentingWriter(debug=True, stream=StringIO()))
