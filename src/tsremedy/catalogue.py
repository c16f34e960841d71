"""Compiled-in lookup tables used by the fixers.

These tables are intentionally static. Adding an entry is the only way to
teach the tool about a new symbol or alias.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

SYMBOL_IMPORTS: Mapping[str, str] = MappingProxyType(
    {
        "React": "import React from 'react';",
        "useState": "import { useState } from 'react';",
        "useEffect": "import { useEffect } from 'react';",
        "useCallback": "import { useCallback } from 'react';",
        "useMemo": "import { useMemo } from 'react';",
        "useRef": "import { useRef } from 'react';",
        "FC": "import type { FC } from 'react';",
        "ReactNode": "import type { ReactNode } from 'react';",
        "Component": "import { Component } from 'react';",
        "cn": "import { cn } from '@/lib/utils';",
        "clsx": "import clsx from 'clsx';",
        "cva": "import { cva } from 'class-variance-authority';",
    }
)

NAMESPACE_IMPORTS: Mapping[str, str] = MappingProxyType(
    {
        "React": "import React from 'react';",
    }
)

# Order matters: aliases are tried top to bottom on each matching line.
ALIAS_MAP: Mapping[str, str] = MappingProxyType(
    {
        "@/components": "./app/_components",
        "@/lib": "./app/_lib",
        "@/hooks": "./app/_hooks",
        "@/utils": "./app/_lib/utils",
        "@/types": "./app/_types",
        "@/constants": "./app/_constants",
    }
)

TESTING_LIBRARY_MODULE = "@testing-library/react"
JEST_DOM_IMPORT = "import '@testing-library/jest-dom';"
REACT_DEFAULT_IMPORT = "import React from 'react';"

DOM_MATCHERS: tuple[str, ...] = (
    "toBeInTheDocument",
    "toHaveClass",
    "toHaveAttribute",
    "toHaveTextContent",
    "toBeDisabled",
    "toBeEnabled",
    "toBeVisible",
    "toHaveValue",
)


def suggest_import(name: str) -> str | None:
    """Return the canonical import statement for ``name`` if one is known."""
    return SYMBOL_IMPORTS.get(name)


def namespace_import(name: str) -> str | None:
    return NAMESPACE_IMPORTS.get(name)


__all__ = [
    "ALIAS_MAP",
    "DOM_MATCHERS",
    "JEST_DOM_IMPORT",
    "NAMESPACE_IMPORTS",
    "REACT_DEFAULT_IMPORT",
    "SYMBOL_IMPORTS",
    "TESTING_LIBRARY_MODULE",
    "namespace_import",
    "suggest_import",
]
