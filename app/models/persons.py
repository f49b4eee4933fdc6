# app/models/persons.py

from typing import List

from pydantic import BaseModel


class NewPerson(BaseModel):
    """A validated creation request; `stack` is already comma-joined."""

    nickname: str
    name: str
    birth_date: str
    stack: str


class Person(BaseModel):
    id: str
    nickname: str
    name: str
    birth_date: str
    stack: List[str]


class PersonOut(BaseModel):
    id: str
    apelido: str
    nome: str
    nascimento: str
    stack: List[str]


class PersonCreatedOut(BaseModel):
    id: str


class CountOut(BaseModel):
    count: int


class MessageOut(BaseModel):
    message: str
