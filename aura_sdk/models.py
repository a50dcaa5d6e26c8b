"""Request parameter shapes for the list endpoints.

Keys follow the wire names (camelCase). Response payloads are returned as
decoded JSON and are not modelled here.
"""
from typing import Literal, NotRequired, TypedDict

SortBy = Literal["created", "updated", "recentAction", "none"]
SortDirection = Literal["asc", "desc"]
ConditionType = Literal["all", "any"]
InterfaceType = Literal[
    "V1_NFT",
    "V1_PRINT",
    "LEGACY_NFT",
    "V2_NFT",
    "FungibleAsset",
    "Custom",
    "Identity",
    "Executable",
]
OwnerType = Literal["single", "token", "multiple"]
RoyaltyTargetType = Literal["creators", "fanout", "single"]


class PaginationParams(TypedDict, total=False):
    page: int
    limit: int
    before: str
    after: str
    cursor: str


class SortingParams(TypedDict, total=False):
    sortBy: SortBy
    sortDirection: SortDirection


class GetAssetsByOwnerParams(PaginationParams, SortingParams):
    ownerAddress: str


class GetAssetsByAuthorityParams(PaginationParams, SortingParams):
    authorityAddress: str


class GetAssetsByCreatorParams(PaginationParams, SortingParams):
    creatorAddress: str
    onlyVerified: NotRequired[bool]


class GetAssetsByGroupParams(PaginationParams, SortingParams):
    groupKey: str
    groupValue: str


class SearchAssetsParams(PaginationParams, SortingParams, total=False):
    negate: bool
    conditionType: ConditionType
    interface: InterfaceType
    ownerAddress: str
    ownerType: OwnerType
    creatorAddress: str
    creatorVerified: bool
    authorityAddress: str
    grouping: tuple[str, str]
    delegateAddress: str
    frozen: bool
    supply: int
    supplyMint: str
    compressed: bool
    compressible: bool
    royaltyTargetType: RoyaltyTargetType
    royaltyTarget: str
    royaltyAmount: int
    burnt: bool
    jsonUri: str


class GetSignaturesForAssetParams(PaginationParams):
    id: str


class TokenAccountOptions(TypedDict, total=False):
    showZeroBalance: bool


class GetTokenAccountsParams(PaginationParams):
    owner: str
    mint: NotRequired[str]
    options: NotRequired[TokenAccountOptions]
