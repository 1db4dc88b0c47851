"""Unit tests for the top-level package surface."""

from __future__ import annotations

import importlib
import re

import nettrace
import nettrace.adapters.http as http_adapter


class TestPackage:
    def test_docstring_imports_resolve(self) -> None:
        statements = re.findall(r"from ([\w.]+) import ([\w, ]+)", nettrace.__doc__ or "")
        assert statements
        for module_name, names in statements:
            module = importlib.import_module(module_name)
            for name in names.split(","):
                assert hasattr(module, name.strip()), f"{module_name}.{name.strip()}"

    def test_http_adapter_exports(self) -> None:
        assert sorted(http_adapter.__all__) == [
            "TaskMetrics",
            "TracedHttpClient",
            "TracingTransport",
            "merge_event_hooks",
            "proposed_redirect",
            "tracing_event_hooks",
        ]
        for name in http_adapter.__all__:
            assert hasattr(http_adapter, name)
