from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from data_browser.app.ui.filters import Matcher, any_field_matcher
from data_browser.app.ui.listing_view import ColumnDef


@dataclass(frozen=True)
class DatasetConfig:
    name: str
    title: str
    collection: str
    items_field: str
    columns: tuple[ColumnDef, ...]
    matchers: Mapping[str, Matcher] = field(default_factory=dict)
    # tab label -> endpoint category, "" meaning the whole collection
    categories: Mapping[str, str] = field(default_factory=dict)
    default_category: str = ""

    def __post_init__(self) -> None:
        keys = [column.key for column in self.columns]
        if len(keys) != len(set(keys)):
            raise ValueError(f"dataset {self.name!r} has duplicate column keys")
        unknown = set(self.matchers) - {column.key for column in self.columns if column.filterable}
        if unknown:
            raise ValueError(f"dataset {self.name!r} has matchers for non-filterable columns: {sorted(unknown)}")
        if self.categories and self.default_category not in self.categories:
            raise ValueError(f"dataset {self.name!r} default category {self.default_category!r} is not a tab")

    @property
    def filterable_keys(self) -> set[str]:
        return {column.key for column in self.columns if column.filterable}

    def category_for(self, tab: str) -> str:
        if not self.categories:
            return ""
        try:
            return self.categories[tab]
        except KeyError:
            raise ValueError(f"unknown tab {tab!r} for dataset {self.name!r}; expected one of {list(self.categories)}") from None


USERS = DatasetConfig(
    name="users",
    title="Users",
    collection="users",
    items_field="users",
    columns=(
        ColumnDef("id", "ID", filterable=True),
        ColumnDef("firstName", "First Name", filterable=True),
        ColumnDef("lastName", "Last Name", filterable=True),
        ColumnDef("maidenName", "Maiden Name"),
        ColumnDef("age", "Age"),
        ColumnDef("gender", "Gender", filterable=True),
        ColumnDef("email", "Email", filterable=True),
        ColumnDef("phone", "Phone"),
        ColumnDef("username", "Username"),
        ColumnDef("birthDate", "Birth Date", filterable=True),
        ColumnDef("bloodGroup", "Blood Group"),
        ColumnDef("eyeColor", "Eye Color"),
    ),
    matchers={"firstName": any_field_matcher("firstName", "lastName")},
)

PRODUCTS = DatasetConfig(
    name="products",
    title="Products",
    collection="products",
    items_field="products",
    columns=(
        ColumnDef("id", "ID"),
        ColumnDef("title", "Title", filterable=True),
        ColumnDef("brand", "Brand", filterable=True),
        ColumnDef("category", "Category", filterable=True),
        ColumnDef("price", "Price"),
        ColumnDef("rating", "Rating"),
        ColumnDef("stock", "Stock"),
        ColumnDef("discountPercentage", "Discount"),
    ),
    categories={"ALL": "", "LAPTOPS": "laptops"},
    default_category="ALL",
)

DATASETS: dict[str, DatasetConfig] = {dataset.name: dataset for dataset in (USERS, PRODUCTS)}


def get_dataset(name: str) -> DatasetConfig:
    try:
        return DATASETS[name]
    except KeyError:
        raise ValueError(f"unknown dataset {name!r}; expected one of {sorted(DATASETS)}") from None
