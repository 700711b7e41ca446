"""Contadores de acesso por chave."""


class KeyStatistics:
    """Estatísticas de hit/miss de uma chave monitorada.

    Instâncias pertencem ao ``Statistics`` que monitora a chave. Os
    contadores são somente leitura para clientes: apenas o
    mutator entregue ao cache por ``create_statistics`` os incrementa.
    """

    __slots__ = ("_hits", "_misses")

    def __init__(self) -> None:
        self._hits = 0
        self._misses = 0

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    def accesses(self) -> int:
        """Total de acessos registrados (hits + misses)."""
        return self._hits + self._misses

    def _increment_hits(self) -> None:
        self._hits += 1

    def _increment_misses(self) -> None:
        self._misses += 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyStatistics):
            return NotImplemented
        return self._hits == other._hits and self._misses == other._misses

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"KeyStatistics(hits={self._hits}, misses={self._misses})"
