import re

import pytest

from copyguard.headers import ENTITY_THEN_YEARS, YEARS_THEN_ENTITY, HeaderMatcher


@pytest.mark.parametrize("line, year", [
    ("Copyright (C) 2019-2022 Example Corp.", 2022),
    ("Copyright 2020, 2021, 2023 Example Corp.", 2023),
    ("Copyright 2023, 2020 Example Corp.", 2020),
    (" * Copyright IBM Corp. 2024, 2025", 2025),
    ("# copyright © 2018 - 2021 Someone", 2021),
    ("// Copyright (c) Example Corp. 2017", 2017),
])
def test_extracts_last_year(line, year):
    assert set(HeaderMatcher().years(line)) == {year}


def test_entity_then_years_groups():
    match = ENTITY_THEN_YEARS.search(" * Copyright IBM Corp. 2024, 2025")
    assert match is not None
    assert match.group("declaration") == "Copyright"
    assert match.group("entity") == "IBM Corp."
    assert match.group("years") == "2024, 2025"
    assert match.group("end") == "2025"


def test_years_then_entity_groups():
    match = YEARS_THEN_ENTITY.search("Copyright (C) 2019-2022 Example Corp.")
    assert match is not None
    assert match.group("declaration") == "Copyright (C)"
    assert match.group("years") == "2019-2022"


def test_no_declaration():
    matcher = HeaderMatcher()
    assert list(matcher.years(" * Licensed under the Apache License, Version 2.0")) == []
    assert list(matcher.years("Copyright Terracotta, Inc.")) == []
    assert list(matcher.years("COPYRIGHT 2024 Example Corp.")) == []


def test_covers():
    lines = ["/*", " * Copyright (C) 2019-2022 Example Corp.", " */"]
    matcher = HeaderMatcher()
    assert matcher.covers(lines, 2022)
    assert matcher.covers(lines, 2019)
    assert not matcher.covers(lines, 2023)
    assert not matcher.covers([], 1970)


def test_any_declaration_suffices():
    lines = ["Copyright Terracotta, Inc. 2010", "Copyright IBM Corp. 2024, 2025"]
    assert HeaderMatcher().covers(lines, 2025)


def test_replaceable_patterns_and_year():
    spdx = re.compile(r"SPDX-FileCopyrightText: (?P<end>\d{4})")
    matcher = HeaderMatcher([spdx], lambda m: int(m.group("end")) + 1)
    assert list(matcher.years("# SPDX-FileCopyrightText: 2023 Example Corp.")) == [2024]
    assert list(matcher.years("Copyright (C) 2023 Example Corp.")) == []
