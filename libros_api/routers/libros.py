from __future__ import annotations

from fastapi import APIRouter, Request, Response, status

from libros_api.db.models import Libro
from libros_api.schemas import LibroIn, LibroOut
from libros_api.services.libro_service import LibroService

router = APIRouter(prefix="/api/libros", tags=["libros"])


def _get_libro_service(request: Request) -> LibroService:
    svc = getattr(getattr(request.app, "state", None), "libro_service", None)
    if not svc:
        raise RuntimeError("LibroService no configurado")
    return svc


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("", response_model=list[LibroOut])
def listar(request: Request):
    return _get_libro_service(request).list_all()


@router.get("/{libro_id}", response_model=LibroOut)
def buscar_por_id(libro_id: int, request: Request):
    libro = _get_libro_service(request).find_by_id(libro_id)
    if libro is None:
        return _not_found()
    return libro


@router.post("", response_model=LibroOut, status_code=status.HTTP_201_CREATED)
def crear(payload: LibroIn, request: Request):
    # the store always assigns the id of a new record
    libro = Libro(titulo=payload.titulo, autor=payload.autor, genero=payload.genero)
    return _get_libro_service(request).save(libro)


@router.put("/{libro_id}", response_model=LibroOut, status_code=status.HTTP_201_CREATED)
def editar(libro_id: int, payload: LibroIn, request: Request):
    svc = _get_libro_service(request)
    libro_db = svc.find_by_id(libro_id)
    if libro_db is None:
        return _not_found()
    libro_db.titulo = payload.titulo
    libro_db.autor = payload.autor
    libro_db.genero = payload.genero
    return svc.save(libro_db)


@router.delete("/{libro_id}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar(libro_id: int, request: Request):
    svc = _get_libro_service(request)
    if svc.find_by_id(libro_id) is None:
        return _not_found()
    svc.delete_by_id(libro_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
