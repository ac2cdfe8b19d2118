"""Consistency of the static chain data.

A failure here is a bug in the metadata table or in the enum,
not in the code.
"""
import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor

from namedchains import named as named_module
from namedchains.chain_data import CHAIN_DATA
from namedchains.named import NamedChain, find_integrity_violations, get_record


def test_no_integrity_violations():
    assert find_integrity_violations() == []


def test_enum_matches_metadata_table():
    assert len(NamedChain.__members__) == len(NamedChain), "Duplicate enum values create aliases"
    assert [n.value for n in NamedChain] == [row["chain_id"] for row in CHAIN_DATA]


def test_chain_ids_unique():
    ids = [n.get_record().chain_id for n in NamedChain]
    assert len(ids) == len(set(ids))


def test_internal_ids_unique():
    internal_ids = [n.get_record().internal_id for n in NamedChain]
    assert len(internal_ids) == len(set(internal_ids))


def test_names_and_aliases_globally_unique():
    counter = Counter()
    for named in NamedChain:
        counter.update(named.get_record().get_accepted_names())
    duplicates = [name for name, count in counter.items() if count > 1]
    assert duplicates == []


def test_alias_never_display_name():
    for named in NamedChain:
        record = get_record(named)
        assert record.name not in record.aliases


def test_chain_ids_in_u64_range():
    for named in NamedChain:
        assert 0 <= named.value <= 2**64 - 1


def test_detect_duplicate_chain_id(monkeypatch):
    """Integrity check catches a row reusing an existing chain id."""
    bad_row = dict(CHAIN_DATA[1], chain_id=1)
    bad_data = (CHAIN_DATA[0], bad_row) + CHAIN_DATA[2:]
    monkeypatch.setattr(named_module, "CHAIN_DATA", bad_data)
    violations = find_integrity_violations()
    assert "Chain id 1 is used by 2 rows" in violations


def test_detect_duplicate_alias(monkeypatch):
    """Integrity check catches two chains claiming the same spelling."""
    bad_row = dict(CHAIN_DATA[1], aliases=("ETHLIVE",))
    bad_data = (CHAIN_DATA[0], bad_row) + CHAIN_DATA[2:]
    monkeypatch.setattr(named_module, "CHAIN_DATA", bad_data)
    violations = find_integrity_violations()
    assert "Name ethlive is claimed by Mainnet, Morden" in violations


def test_detect_trailing_slash(monkeypatch):
    bad_row = dict(CHAIN_DATA[0], explorer=("https://api.etherscan.io/v2/api?chainid=1", "https://etherscan.io/"))
    bad_data = (bad_row,) + CHAIN_DATA[1:]
    monkeypatch.setattr(named_module, "CHAIN_DATA", bad_data)
    violations = find_integrity_violations()
    assert len(violations) == 1
    assert violations[0].startswith("Mainnet: bad explorer URLs")


def test_registry_build_is_logged(logger, caplog, monkeypatch):
    """Rebuild the indexes from scratch."""
    monkeypatch.setattr(named_module, "_records", {})
    monkeypatch.setattr(named_module, "_id_map", {})
    monkeypatch.setattr(named_module, "_name_map", {})

    with caplog.at_level(logging.DEBUG, logger="namedchains.named"):
        assert named_module.lookup_by_id(1) == NamedChain.mainnet

    assert "Chain registry initialised, 174 chains" in caplog.text


def test_concurrent_first_lookups(caplog, monkeypatch):
    """Indexes are built once when many threads hit an empty registry."""
    monkeypatch.setattr(named_module, "_records", {})
    monkeypatch.setattr(named_module, "_id_map", {})
    monkeypatch.setattr(named_module, "_name_map", {})

    expected = list(NamedChain)

    def lookup(named: NamedChain):
        return named_module.lookup_by_id(named.value), named_module.lookup_by_name(named.get_record().name)

    with caplog.at_level(logging.DEBUG, logger="namedchains.named"):
        with ThreadPoolExecutor(max_workers=16) as executor:
            results = list(executor.map(lookup, expected))

    assert results == [(named, named) for named in expected]
    assert caplog.text.count("Chain registry initialised") == 1
