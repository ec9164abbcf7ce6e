"""Shared fixtures for rule parsing and provider tests."""
from __future__ import annotations

import pytest

SAMPLE_LIST = """\
// This Source Code Form is subject to the terms of the Mozilla Public
// License, v. 2.0.

// ===BEGIN ICANN DOMAINS===

// com : https://en.wikipedia.org/wiki/.com
com

// uk : https://en.wikipedia.org/wiki/.uk
uk
co.uk

// ck : https://en.wikipedia.org/wiki/.ck
*.ck
!www.ck

// jp
jp
*.kawasaki.jp
!city.kawasaki.jp

// cn
cn
xn--55qx5d.cn

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

// GitHub, Inc.
github.io
blogspot.com   trailing text is ignored

// ===END PRIVATE DOMAINS===
"""


@pytest.fixture
def sample_list() -> str:
    return SAMPLE_LIST


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "public_suffix_list.dat"
    path.write_text(SAMPLE_LIST, encoding="utf-8")
    return path
