from pydantic import BaseModel, ConfigDict


class LibroIn(BaseModel):
    # id is accepted for symmetry with LibroOut but never selects the row
    id: int | None = None
    titulo: str | None = None
    autor: str | None = None
    genero: str | None = None


class LibroOut(LibroIn):
    model_config = ConfigDict(from_attributes=True)
