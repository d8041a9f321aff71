"""Data models for the genome annotation API."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_serializer

__all__ = ["REF_KEY", "GENE_ID_LIST_KEY", "WIRE_KEYS", "InputsGetMrnaByGene"]

logger = logging.getLogger(__name__)

REF_KEY = "ref"
GENE_ID_LIST_KEY = "gene_id_list"
WIRE_KEYS = frozenset({REF_KEY, GENE_ID_LIST_KEY})


class InputsGetMrnaByGene(BaseModel):
    """Parameters of the ``get_mrna_by_gene`` call.

    The two declared fields are read from and written to the ``ref`` and
    ``gene_id_list`` wire keys. Any other key found in a payload is kept in
    :attr:`extension_properties` and written back verbatim, so payloads
    produced against a newer or older schema survive a round trip.

    Keyword construction uses the wire keys (``InputsGetMrnaByGene(ref=...)``);
    plain attribute assignment and the ``with_*`` builders use the Python
    names. Assignment is not validated.
    """

    model_config = ConfigDict(extra="allow")

    reference: str | None = Field(
        default=None,
        alias=REF_KEY,
        description="Reference to the genome data object, e.g. a workspace reference.",
    )
    gene_identifiers: list[str] | None = Field(
        default=None,
        alias=GENE_ID_LIST_KEY,
        description=(
            "Genes to fetch mRNAs for. ``None`` means all genes, while an "
            "empty list explicitly requests none."
        ),
    )

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> InputsGetMrnaByGene:
        """Build an instance from a decoded wire object.

        Raises ``pydantic.ValidationError`` if a declared key has the wrong
        shape.
        """
        params = cls.model_validate(dict(payload))
        logger.debug(
            "Parsed %s with %d extension properties",
            cls.__name__,
            len(params.extension_properties),
        )
        return params

    def to_wire(self) -> dict[str, Any]:
        """Return the wire object for these parameters."""
        return self.model_dump()

    @model_serializer
    def serialize_wire(self) -> dict[str, Any]:
        wire: dict[str, Any] = {}
        if self.reference is not None:
            wire[REF_KEY] = self.reference
        if self.gene_identifiers is not None:
            wire[GENE_ID_LIST_KEY] = self.gene_identifiers
        for name, value in self.extension_properties.items():
            # Declared fields win over colliding extension entries.
            if name in WIRE_KEYS:
                logger.debug("Dropping extension property %r shadowed by a field", name)
                continue
            wire[name] = value
        return wire

    def with_reference(self, reference: str | None) -> InputsGetMrnaByGene:
        self.reference = reference
        return self

    def with_gene_identifiers(
        self, gene_identifiers: list[str] | None
    ) -> InputsGetMrnaByGene:
        self.gene_identifiers = gene_identifiers
        return self

    @property
    def extension_properties(self) -> dict[str, Any]:
        """Live mapping of properties not declared by the schema.

        Changes made to the returned dict are reflected in the instance.
        """
        return self.__pydantic_extra__

    def set_extension_property(self, name: str, value: Any) -> None:
        """Store ``value`` under ``name`` in the extension properties.

        Raises:
            ValueError: If ``name`` is the wire key of a declared field.
        """
        if name in WIRE_KEYS:
            logger.debug("Rejected extension property %r", name)
            raise ValueError(
                f"{name!r} is a declared field of {type(self).__name__}; "
                "set it through its attribute instead."
            )
        self.extension_properties[name] = value

    @property
    def additional_keys(self) -> list[str]:
        return list(self.extension_properties.keys())

    def __getitem__(self, name: str) -> Any:
        return self.extension_properties[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self.set_extension_property(name, value)

    def __delitem__(self, name: str) -> None:
        del self.extension_properties[name]

    def __contains__(self, name: object) -> bool:
        return name in self.extension_properties

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        """Iterate over extension property names, like the item access above."""
        return iter(self.extension_properties)

    def describe(self) -> str:
        """Human readable rendering for logs and diagnostics."""
        return (
            f"{type(self).__name__}(reference={self.reference!r}, "
            f"gene_identifiers={self.gene_identifiers!r}, "
            f"extension_properties={self.extension_properties!r})"
        )

    def __str__(self) -> str:
        return self.describe()
