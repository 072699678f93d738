"""
Tests for the band, combo and feature capability lookups
"""

from device_capabilities.domains.band.adapters.sqlmodel_band_repository import (
    SQLModelBandRepository,
)
from device_capabilities.domains.band.models.dto import FindDevicesByBandParams
from device_capabilities.domains.combo.adapters.sqlmodel_combo_repository import (
    SQLModelComboRepository,
)
from device_capabilities.domains.combo.models.dto import FindDevicesByComboParams
from device_capabilities.domains.common.models.capability_model import SupportStatus
from device_capabilities.domains.feature.adapters.sqlmodel_feature_repository import (
    SQLModelFeatureRepository,
)
from device_capabilities.domains.feature.models.dto import FindDevicesByFeatureParams


def software_ids(result):
    return [s.id for s in result.software]


# --- Bands ---
def test_band_lookup_for_provider_only_counts_that_carrier(run, catalog):
    async def lookup(session):
        return await SQLModelBandRepository(session).find_devices_supporting_band(
            FindDevicesByBandParams(band_id=catalog.n77, provider_id=catalog.telus)
        )

    results = run(lookup)

    assert [r.device.id for r in results] == [catalog.google]
    assert results[0].support_status == SupportStatus.PROVIDER_SPECIFIC
    assert results[0].provider.name == "Telus"
    assert software_ids(results[0]) == [catalog.pixel_os]


def test_band_lookup_without_provider_unions_global_and_carrier_rows(run, catalog):
    async def lookup(session):
        return await SQLModelBandRepository(session).find_devices_supporting_band(
            FindDevicesByBandParams(band_id=catalog.n77)
        )

    results = run(lookup)

    assert [r.device.vendor for r in results] == ["Apple", "Google"]
    apple, google = results
    assert apple.support_status == SupportStatus.GLOBAL
    assert software_ids(apple) == [catalog.ios_17_1]
    assert apple.provider is None
    assert google.support_status == SupportStatus.PROVIDER_SPECIFIC
    assert google.provider is None


def test_band_lookup_groups_software_per_device(run, catalog):
    async def lookup(session):
        return await SQLModelBandRepository(session).find_devices_supporting_band(
            FindDevicesByBandParams(band_id=catalog.lte2)
        )

    results = run(lookup)

    assert [r.device.vendor for r in results] == ["Apple", "Samsung"]
    assert software_ids(results[0]) == [catalog.ios_17_0, catalog.ios_17_1]
    assert software_ids(results[1]) == [catalog.one_ui]
    assert all(r.support_status == SupportStatus.GLOBAL for r in results)


def test_band_lookup_technology_mismatch_is_empty(run, catalog):
    async def lookup(session):
        return await SQLModelBandRepository(session).find_devices_supporting_band(
            FindDevicesByBandParams(band_id=catalog.lte2, technology="NR")
        )

    assert run(lookup) == []


def test_band_lookup_unsupported_band_is_empty(run, catalog):
    async def lookup(session):
        return await SQLModelBandRepository(session).find_devices_supporting_band(
            FindDevicesByBandParams(band_id=catalog.gsm850)
        )

    assert run(lookup) == []


def test_band_search_filters(run, catalog):
    async def search(session):
        repo = SQLModelBandRepository(session)
        return (
            await repo.search(technology="NR"),
            await repo.search(band_number="77"),
            await repo.find_all(),
        )

    nr, n77, everything = run(search)

    assert [b.id for b in nr] == [catalog.n77]
    assert [b.id for b in n77] == [catalog.n77]
    # ordered by technology then band number
    assert [b.technology for b in everything] == ["GSM", "LTE", "NR"]


def test_bands_for_device_software(run, catalog):
    async def lookup(session):
        repo = SQLModelBandRepository(session)
        return (
            await repo.find_by_device_software(catalog.apple, catalog.ios_17_1),
            await repo.find_by_device_software_provider(
                catalog.apple, catalog.ios_17_0, catalog.telus
            ),
            await repo.find_by_device_software_provider(
                catalog.apple, catalog.ios_17_1, catalog.rogers, "LTE"
            ),
        )

    global_bands, telus_bands, rogers_lte = run(lookup)

    assert [b.id for b in global_bands] == [catalog.lte2, catalog.n77]
    assert [b.id for b in telus_bands] == [catalog.lte2]
    assert rogers_lte == []


# --- Combos ---
def test_combo_lookup_without_provider(run, catalog):
    async def lookup(session):
        return await SQLModelComboRepository(session).find_devices_supporting_combo(
            FindDevicesByComboParams(combo_id=catalog.endc)
        )

    results = run(lookup)

    assert [r.device.vendor for r in results] == ["Apple", "Samsung"]
    assert results[0].support_status == SupportStatus.PROVIDER_SPECIFIC
    assert results[1].support_status == SupportStatus.GLOBAL


def test_combo_lookup_for_provider(run, catalog):
    async def lookup(session):
        return await SQLModelComboRepository(session).find_devices_supporting_combo(
            FindDevicesByComboParams(combo_id=catalog.endc, provider_id=catalog.rogers)
        )

    results = run(lookup)

    assert [r.device.id for r in results] == [catalog.apple]
    assert results[0].provider.id == catalog.rogers
    assert software_ids(results[0]) == [catalog.ios_17_1]


def test_combo_bands(run, catalog):
    async def lookup(session):
        repo = SQLModelComboRepository(session)
        return (
            await repo.find_bands_by_combo(catalog.endc),
            await repo.find_bands_by_combos([catalog.endc, catalog.lte_ca]),
        )

    bands, by_combo = run(lookup)

    assert [b.id for b in bands] == [catalog.lte2, catalog.n77]
    assert [b.id for b in by_combo[catalog.endc]] == [catalog.lte2, catalog.n77]
    assert by_combo.get(catalog.lte_ca, []) == []


def test_combo_search(run, catalog):
    async def search(session):
        repo = SQLModelComboRepository(session)
        return (
            await repo.search(technology="EN-DC"),
            await repo.search(name="4A"),
        )

    endc, named = run(search)

    assert [c.id for c in endc] == [catalog.endc]
    assert [c.id for c in named] == [catalog.lte_ca]


# --- Features ---
def test_feature_lookup_without_provider_is_global(run, catalog):
    async def lookup(session):
        return await SQLModelFeatureRepository(session).find_devices_supporting_feature(
            FindDevicesByFeatureParams(feature_id=catalog.volte)
        )

    results = run(lookup)

    assert [r.device.vendor for r in results] == ["Apple", "Samsung"]
    assert software_ids(results[0]) == [catalog.ios_17_0, catalog.ios_17_1]
    assert all(r.support_status == SupportStatus.GLOBAL for r in results)
    assert all(r.provider is None for r in results)


def test_feature_lookup_for_provider(run, catalog):
    async def lookup(session):
        return await SQLModelFeatureRepository(session).find_devices_supporting_feature(
            FindDevicesByFeatureParams(feature_id=catalog.volte, provider_id=catalog.rogers)
        )

    results = run(lookup)

    assert [r.device.id for r in results] == [catalog.samsung]
    assert results[0].support_status == SupportStatus.PROVIDER_SPECIFIC
    assert results[0].provider.name == "Rogers"


def test_features_for_device_software(run, catalog):
    async def lookup(session):
        repo = SQLModelFeatureRepository(session)
        return (
            await repo.find_by_device_software_provider(catalog.samsung, catalog.one_ui),
            await repo.find_by_device_software_provider(
                catalog.samsung, catalog.one_ui, catalog.telus
            ),
        )

    everywhere, on_telus = run(lookup)

    assert [f.name for f in everywhere] == ["VoLTE", "VoNR"]
    assert [f.name for f in on_telus] == ["VoNR"]
