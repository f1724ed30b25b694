from pydantic import BaseModel


def reject_explicit_nulls(model: BaseModel) -> None:
    """
    Refuse `null` for any field the client actually sent.

    Every writable column is NOT NULL, so a present-but-null field can
    never be applied; leaving a field out is how a client keeps its value.

    Raises:
        ValueError: Naming the first offending field.
    """
    for name in sorted(model.model_fields_set):
        if getattr(model, name) is None:
            raise ValueError(f"{name} cannot be null")
