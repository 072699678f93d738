"""
Reference catalog for development databases.

Run with ``python -m device_capabilities.db.seed`` to clear and reload every
table, or let the application lifespan load it into an empty development
database. A fixed random seed keeps the carrier certification gaps identical
between runs.
"""

import asyncio
import logging
import random
from datetime import date
from typing import Dict, List, Optional, Tuple

from sqlalchemy import delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from device_capabilities.domains.band.models.band_model import (
    Band,
    DeviceSoftwareBand,
    ProviderDeviceSoftwareBand,
)
from device_capabilities.domains.combo.models.combo_model import (
    Combo,
    ComboBand,
    DeviceSoftwareCombo,
    ProviderDeviceSoftwareCombo,
)
from device_capabilities.domains.device.models.device_model import Device
from device_capabilities.domains.feature.models.feature_model import (
    DeviceSoftwareProviderFeature,
    Feature,
)
from device_capabilities.domains.provider.models.provider_model import Provider
from device_capabilities.domains.software.models.software_model import Software

logger = logging.getLogger(__name__)

RANDOM_SEED = 20240414

PROVIDERS = [
    ("Telus", "Canada", "5G"),
    ("Rogers", "Canada", "5G"),
    ("Bell", "Canada", "5G"),
    ("Freedom Mobile", "Canada", "5G"),
]

FEATURES = [
    ("VoLTE", "Voice over LTE - HD voice calls over 4G"),
    ("VoWiFi", "Voice over WiFi - WiFi calling support"),
    ("VoNR", "Voice over NR - Native 5G voice calls"),
    ("5G SA", "5G Standalone - True 5G without LTE anchor"),
    ("5G NSA", "5G Non-Standalone - 5G with LTE anchor (EN-DC)"),
    ("Carrier Aggregation", "Combine multiple LTE bands for faster speeds"),
    ("MIMO 4x4", "Four antenna streams for improved throughput"),
    ("LAA", "Licensed Assisted Access - Use unlicensed 5GHz spectrum"),
]

LEGACY_BANDS = {
    "GSM": ["850", "900", "1800", "1900"],
    "HSPA": ["I", "II", "IV", "V"],
}

# band number -> DL bandwidth classes; each class is stored DL-only and with UL class A
LTE_BAND_CLASSES = {
    "2": "ABCDEF",
    "4": "ABCDE",
    "5": "ABCD",
    "7": "ABCDE",
    "12": "ABC",
    "13": "AB",
    "17": "ABC",
    "29": "AB",
    "30": "ABCD",
    "66": "ABCDEFG",
    "71": "ABCD",
}

NR_BAND_CLASSES = {
    "n2": "ABC",
    "n5": "ABC",
    "n7": "ABC",
    "n12": "AB",
    "n25": "ABC",
    "n41": "ABCD",
    "n66": "ABC",
    "n71": "ABC",
    "n77": "ABCDE",
    "n78": "ABCD",
}

BASIC_LTE_BANDS = ["2", "4", "5", "12"]
BASIC_NR_BANDS = ["n66", "n71", "n77"]

# (technology, band_number, dl_band_class, ul_band_class)
BandKey = Tuple[str, str, Optional[str], Optional[str]]

COMBOS: List[Tuple[str, str, List[BandKey]]] = [
    ("2A-4A", "LTE CA", [("LTE", "2", "A", "A"), ("LTE", "4", "A", None)]),
    (
        "2A-5A-7A",
        "LTE CA",
        [("LTE", "2", "A", "A"), ("LTE", "5", "A", None), ("LTE", "7", "A", None)],
    ),
    ("2A-12A", "LTE CA", [("LTE", "2", "A", "A"), ("LTE", "12", "A", None)]),
    ("4A-7A", "LTE CA", [("LTE", "4", "A", "A"), ("LTE", "7", "A", None)]),
    ("4A-12A", "LTE CA", [("LTE", "4", "A", "A"), ("LTE", "12", "A", None)]),
    ("66A-66A", "LTE CA", [("LTE", "66", "A", "A"), ("LTE", "66", "A", None)]),
    ("2A-4A-7A", "LTE CA", []),
    ("2A-4A-12A", "LTE CA", []),
    ("4A-5A-7A", "LTE CA", []),
    ("66A-71A", "LTE CA", []),
    ("2A-n66A", "EN-DC", [("LTE", "2", "A", "A"), ("NR", "n66", "A", "A")]),
    ("2A-n71A", "EN-DC", [("LTE", "2", "A", "A"), ("NR", "n71", "A", "A")]),
    ("4A-n66A", "EN-DC", [("LTE", "4", "A", "A"), ("NR", "n66", "A", "A")]),
    ("4A-n71A", "EN-DC", [("LTE", "4", "A", "A"), ("NR", "n71", "A", "A")]),
    ("66A-n77A", "EN-DC", [("LTE", "66", "A", "A"), ("NR", "n77", "A", "A")]),
    ("7A-n78A", "EN-DC", [("LTE", "7", "A", "A"), ("NR", "n78", "A", "A")]),
    ("2A-4A-n71A", "EN-DC", []),
    ("66A-n41A", "EN-DC", []),
    ("7A-n77A", "EN-DC", []),
    ("n66A-n77A", "NR CA", [("NR", "n66", "A", "A"), ("NR", "n77", "A", None)]),
    ("n71A-n77A", "NR CA", [("NR", "n71", "A", "A"), ("NR", "n77", "A", None)]),
    ("n77A-n78A", "NR CA", [("NR", "n77", "A", "A"), ("NR", "n78", "A", None)]),
    ("n41A-n66A-n77A", "NR CA", []),
]

DEVICES = [
    ("Apple", "A2893", "iPhone 15 Pro Max", date(2023, 9, 22)),
    ("Apple", "A2894", "iPhone 15 Pro", date(2023, 9, 22)),
    ("Apple", "A2846", "iPhone 14 Pro", date(2022, 9, 16)),
    ("Samsung", "SM-S928W", "Galaxy S24 Ultra", date(2024, 1, 24)),
    ("Samsung", "SM-S926W", "Galaxy S24+", date(2024, 1, 24)),
    ("Samsung", "SM-S918W", "Galaxy S23 Ultra", date(2023, 2, 17)),
    ("Samsung", "SM-S916W", "Galaxy S23+", date(2023, 2, 17)),
    ("Samsung", "SM-A546W", "Galaxy A54 5G", date(2023, 3, 24)),
    ("Google", "GF5KQ", "Pixel 8 Pro", date(2023, 10, 12)),
    ("Google", "G9BQD", "Pixel 8", date(2023, 10, 12)),
    ("Google", "GE9DP", "Pixel 7 Pro", date(2022, 10, 13)),
    ("OnePlus", "CPH2583", "OnePlus 12", date(2024, 1, 23)),
    ("OnePlus", "CPH2449", "OnePlus 11", date(2023, 2, 16)),
    ("Motorola", "XT2341-1", "Moto G Power 5G", date(2023, 4, 13)),
    ("Motorola", "XT2321-1", "Edge 40", date(2023, 5, 4)),
]

# Child tables first
_TABLES_IN_DELETE_ORDER = [
    DeviceSoftwareProviderFeature,
    ProviderDeviceSoftwareCombo,
    ProviderDeviceSoftwareBand,
    ComboBand,
    DeviceSoftwareCombo,
    DeviceSoftwareBand,
    Software,
    Device,
    Combo,
    Band,
    Feature,
    Provider,
]


def _is_flagship(device: Device) -> bool:
    name = device.market_name or ""
    return "Pro" in name or "Ultra" in name


def _has_5g(device: Device) -> bool:
    return device.release_date.year >= 2023 or _is_flagship(device)


def _add_months(value: date, months: int) -> date:
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    # Clamp to a day present in every month
    return date(year, month, min(value.day, 28))


def _band_rows() -> List[Band]:
    rows = []
    for technology, numbers in LEGACY_BANDS.items():
        rows.extend(Band(band_number=n, technology=technology) for n in numbers)
    for technology, table in (("LTE", LTE_BAND_CLASSES), ("NR", NR_BAND_CLASSES)):
        for number, classes in table.items():
            for ul_class in (None, "A"):
                for dl_class in classes:
                    rows.append(
                        Band(
                            band_number=number,
                            technology=technology,
                            dl_band_class=dl_class,
                            ul_band_class=ul_class,
                        )
                    )
    return rows


def _software_rows(devices: List[Device], rng: random.Random) -> List[Software]:
    rows = []
    for device in devices:
        platform = "iOS" if device.vendor == "Apple" else "Android"
        for i in range(rng.randint(3, 5)):
            if platform == "iOS":
                version = f"{max(15, 17 - i)}.{rng.randint(0, 5)}.{rng.randint(0, 2)}"
            else:
                version = f"{max(11, 14 - i)}.0"
            rows.append(
                Software(
                    device_id=device.id,
                    name=f"{platform} {version}",
                    platform=platform,
                    ptcrb=20000 + rng.randint(0, 9999),
                    svn=rng.randint(0, 99),
                    build_number=f"{version}.{rng.randint(0, 999)}",
                    release_date=_add_months(device.release_date, i * 3),
                )
            )
    return rows


def _global_bands_for(device: Device, bands: List[Band]) -> List[Band]:
    flagship = _is_flagship(device)
    selected = [b for b in bands if b.technology in LEGACY_BANDS]
    selected += [
        b
        for b in bands
        if b.technology == "LTE" and (flagship or b.band_number in BASIC_LTE_BANDS)
    ]
    if _has_5g(device):
        selected += [
            b
            for b in bands
            if b.technology == "NR" and (flagship or b.band_number in BASIC_NR_BANDS)
        ]
    return selected


def _global_combos_for(device: Device, combos: List[Combo]) -> List[Combo]:
    flagship = _is_flagship(device)
    by_tech: Dict[str, List[Combo]] = {}
    for combo in combos:
        by_tech.setdefault(combo.technology, []).append(combo)

    selected = by_tech["LTE CA"] if flagship else by_tech["LTE CA"][:3]
    if _has_5g(device):
        selected = selected + (by_tech["EN-DC"] if flagship else by_tech["EN-DC"][:3])
        if flagship:
            selected = selected + by_tech["NR CA"]
    return selected


def _carrier_certifies_band(provider: Provider, band: Band, rng: random.Random) -> bool:
    if provider.name == "Telus" and band.band_number == "n77":
        return rng.random() > 0.5
    if provider.name == "Rogers" and band.band_number == "n71":
        return rng.random() > 0.3
    if provider.name == "Freedom Mobile":
        if band.band_number == "n78":
            return False
        if band.band_number in ("n77", "n41"):
            return rng.random() > 0.4
    return True


def _carrier_certifies_combo(
    provider: Provider, combo: Combo, rng: random.Random
) -> bool:
    if provider.name == "Freedom Mobile" and "n77" in combo.name:
        return rng.random() > 0.5
    if provider.name == "Telus" and combo.name == "66A-n77A":
        return rng.random() > 0.4
    return True


def _feature_names_for(
    device: Device, provider: Provider, rng: random.Random
) -> List[str]:
    year = device.release_date.year
    flagship = _is_flagship(device)
    names = ["VoLTE"]
    if rng.random() > 0.2:
        names.append("VoWiFi")
    if year >= 2023:
        names.append("5G NSA")
    if flagship and year >= 2023 and provider.name != "Freedom Mobile":
        names.append("5G SA")
    if flagship and year >= 2024 and provider.name in ("Telus", "Rogers"):
        names.append("VoNR")
    if year >= 2022:
        names.append("Carrier Aggregation")
    if flagship:
        names.append("MIMO 4x4")
    return names


async def clear_catalog(session: AsyncSession) -> None:
    for table in _TABLES_IN_DELETE_ORDER:
        await session.execute(delete(table))
    await session.commit()
    logger.info("Cleared existing catalog data.")


async def is_catalog_empty(session: AsyncSession) -> bool:
    result = await session.execute(select(func.count(Device.id)))
    return (result.scalar_one_or_none() or 0) == 0


async def seed(session: AsyncSession) -> Dict[str, int]:
    """Load the full catalog and return row counts per entity."""
    rng = random.Random(RANDOM_SEED)
    try:
        providers = [
            Provider(name=n, country=c, network_type=t) for n, c, t in PROVIDERS
        ]
        features = [Feature(name=n, description=d) for n, d in FEATURES]
        bands = _band_rows()
        combos = [Combo(name=n, technology=t) for n, t, _ in COMBOS]
        devices = [
            Device(vendor=v, model_num=m, market_name=name, release_date=released)
            for v, m, name, released in DEVICES
        ]
        session.add_all(providers + features + bands + combos + devices)
        await session.flush()

        band_index = {
            (b.technology, b.band_number, b.dl_band_class, b.ul_band_class): b
            for b in bands
        }
        for combo, (_, _, members) in zip(combos, COMBOS):
            for key in members:
                session.add(ComboBand(combo_id=combo.id, band_id=band_index[key].id))

        softwares = _software_rows(devices, rng)
        session.add_all(softwares)
        await session.flush()

        devices_by_id = {d.id: d for d in devices}
        feature_by_name = {f.name: f for f in features}
        for sw in softwares:
            device = devices_by_id[sw.device_id]
            global_bands = _global_bands_for(device, bands)
            global_combos = _global_combos_for(device, combos)

            for band in global_bands:
                session.add(
                    DeviceSoftwareBand(
                        device_id=device.id, software_id=sw.id, band_id=band.id
                    )
                )
            for combo in global_combos:
                session.add(
                    DeviceSoftwareCombo(
                        device_id=device.id, software_id=sw.id, combo_id=combo.id
                    )
                )

            for provider in providers:
                for band in global_bands:
                    if _carrier_certifies_band(provider, band, rng):
                        session.add(
                            ProviderDeviceSoftwareBand(
                                provider_id=provider.id,
                                device_id=device.id,
                                software_id=sw.id,
                                band_id=band.id,
                            )
                        )
                for combo in global_combos:
                    if _carrier_certifies_combo(provider, combo, rng):
                        session.add(
                            ProviderDeviceSoftwareCombo(
                                provider_id=provider.id,
                                device_id=device.id,
                                software_id=sw.id,
                                combo_id=combo.id,
                            )
                        )
                for name in _feature_names_for(device, provider, rng):
                    session.add(
                        DeviceSoftwareProviderFeature(
                            device_id=device.id,
                            software_id=sw.id,
                            provider_id=provider.id,
                            feature_id=feature_by_name[name].id,
                        )
                    )

        await session.commit()
    except Exception as e:
        await session.rollback()
        logger.error(f"Error seeding catalog data: {e}", exc_info=True)
        raise

    summary = {
        "devices": len(devices),
        "softwares": len(softwares),
        "bands": len(bands),
        "combos": len(combos),
        "features": len(features),
        "providers": len(providers),
    }
    logger.info(f"Catalog seeded: {summary}")
    return summary


async def main() -> None:
    from device_capabilities.db.database import database
    from device_capabilities.db.base import get_session_maker

    await database.connect()
    try:
        async with get_session_maker()() as session:
            await clear_catalog(session)
            await seed(session)
    finally:
        await database.disconnect()


if __name__ == "__main__":
    asyncio.run(main())
