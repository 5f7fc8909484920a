def transfer(source, dest, card_id, target_position=None):
    """Move ``card_id`` from ``source`` to ``dest`` at ``target_position``.

    ``source`` and ``dest`` may be the same store (reorder). The card is
    removed first, so the position is clamped against the destination as it
    looks after the removal. ``None`` appends at the end.

    Raises CardNotFound, leaving both stores untouched, when the card is not
    in ``source``.
    """
    card = source.remove_by_id(card_id)
    if target_position is None:
        return dest.append(card)
    return dest.insert_at(target_position, card)
