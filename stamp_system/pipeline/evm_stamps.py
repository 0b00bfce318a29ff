"""Possible EVM stamp discovery for an address.

Given the configured platforms and the identity's passport, asks the IAM
service in one bulk request which of the not-yet-held EVM provider types
currently validate, then narrows the platform descriptors down to the
groups and providers that passed.

This only drives optional suggestions, so transport failures are logged and
downgraded to an empty result instead of propagating.

Usage:
    from stamp_system.pipeline import fetch_possible_evm_stamps

    platforms = await fetch_possible_evm_stamps(address, PLATFORMS, passport)
"""

from typing import Mapping, Optional

import httpx

from stamp_system.config.logging import get_logger
from stamp_system.data_management.schemas import (
    Passport,
    PlatformGroupSpec,
    PlatformId,
    PlatformSpec,
    ProviderId,
    ValidatedPlatform,
    ValidatedProvider,
    ValidatedProviderGroup,
)
from stamp_system.sources.iam_client import IamClient

logger = get_logger("pipeline.evm_stamps")


def get_types_to_check(
    evm_platforms: list[PlatformSpec],
    passport: Optional[Passport],
) -> list[ProviderId]:
    """Provider ids of the EVM platforms, minus those already held in passport."""
    evm_providers = [
        provider_id
        for platform in evm_platforms
        for provider_id in platform.provider_ids()
    ]
    if not passport:
        return evm_providers

    existing = passport.provider_types()
    return [provider_id for provider_id in evm_providers if provider_id.value not in existing]


def get_valid_group_providers(
    group: PlatformGroupSpec,
    valid_ids: set[str],
) -> list[ValidatedProvider]:
    return [
        ValidatedProvider(name=provider.name, title=provider.title)
        for provider in group.providers
        if provider.name.value in valid_ids
    ]


def get_valid_platform_groups(
    platform: PlatformSpec,
    valid_ids: set[str],
) -> list[ValidatedProviderGroup]:
    """Groups of platform that keep at least one valid provider."""
    candidates = (
        (group.platform_group, get_valid_group_providers(group, valid_ids))
        for group in platform.groups
    )
    return [
        ValidatedProviderGroup(name=name, providers=providers)
        for name, providers in candidates
        if providers
    ]


async def fetch_possible_evm_stamps(
    address: str,
    all_platforms: Mapping[PlatformId, PlatformSpec],
    passport: Optional[Passport] = None,
    iam_client: Optional[IamClient] = None,
) -> list[ValidatedPlatform]:
    """
    Return the EVM platforms with groups whose checks pass for address.

    Args:
        address: Identity to check.
        all_platforms: Platform descriptors keyed by id.
        passport: Stamps already held; their types are not re-checked.
        iam_client: Client for the bulk check. Created (and closed) if None.

    Returns:
        ValidatedPlatform list in platform order; empty on transport failure.
    """
    evm_platforms = [platform for platform in all_platforms.values() if platform.is_evm]
    types = [provider_id.value for provider_id in get_types_to_check(evm_platforms, passport)]

    client = iam_client or IamClient()
    try:
        responses = await client.check(address, types)
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"Bulk check failed for {address}: {e}")
        return []
    finally:
        if iam_client is None:
            await client.close()

    valid_ids = {response.type for response in responses if response.valid}

    candidates = (
        (platform, get_valid_platform_groups(platform, valid_ids))
        for platform in evm_platforms
    )
    validated = [
        ValidatedPlatform(groups=groups, platform=platform)
        for platform, groups in candidates
        if groups
    ]

    logger.info(
        f"{len(validated)} of {len(evm_platforms)} EVM platforms have passing checks",
        address=address,
        checked=len(types),
    )
    return validated
