# mutations.py
from errors import IdentityConflict, NotFound


def index_of(collection, identity, identity_field):
    for i, record in enumerate(collection):
        if record.get(identity_field) == identity:
            return i
    return -1


def create(collection, record, identity_field):
    identity = record.get(identity_field)
    if index_of(collection, identity, identity_field) != -1:
        raise IdentityConflict(identity)
    return [dict(record)] + list(collection)


def update(collection, identity, record, identity_field):
    idx = index_of(collection, identity, identity_field)
    if idx == -1:
        raise NotFound(identity)
    replacement = dict(record)
    replacement[identity_field] = identity
    updated = list(collection)
    updated[idx] = replacement
    return updated


def remove(collection, identity, identity_field):
    idx = index_of(collection, identity, identity_field)
    if idx == -1:
        raise NotFound(identity)
    return list(collection[:idx]) + list(collection[idx + 1:])
