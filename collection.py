# collection.py
import logging
from datetime import datetime

import mutations
import query as q
from errors import CollectionError, NotFound, SeedDataError
from export import build_export
from notifications import NotificationChannel

logger = logging.getLogger(__name__)


class CollectionController:
    def __init__(self, schema, seed=None, notifications=None, clock=None):
        self.schema = schema
        self.clock = clock or datetime.now
        self.notifications = notifications or NotificationChannel(clock=self.clock)
        self.query = q.QueryState()
        self.pending_delete = None
        self._records = self._load_seed(schema.seed if seed is None else seed)

    def _load_seed(self, seed):
        id_field = self.schema.identity_field
        records, seen = [], set()
        for raw in seed:
            record = self.schema.clean(raw)
            identity = record.get(id_field)
            if identity in seen:
                raise SeedDataError(f"{self.schema.name}: duplicate identity {identity} in seed data")
            try:
                self.schema.validate(record)
            except CollectionError as e:
                raise SeedDataError(f"{self.schema.name}: {e}") from e
            seen.add(identity)
            records.append(record)
        logger.debug("[%s] loaded %d seed records", self.schema.name, len(records))
        return records

    # --- READ ---
    def __len__(self):
        return len(self._records)

    @property
    def records(self):
        return [dict(r) for r in self._records]

    @property
    def identities(self):
        return [r.get(self.schema.identity_field) for r in self._records]

    def find(self, identity):
        idx = mutations.index_of(self._records, identity, self.schema.identity_field)
        return dict(self._records[idx]) if idx != -1 else None

    @property
    def filtered_view(self):
        return [dict(r) for r in q.filter_view(self._records, self.query, self.schema.searchable_fields)]

    @property
    def page(self):
        page = q.paginate(self.filtered_view, self.query.page, self.schema.page_size)
        self.query.page = page.current_page
        return page

    @property
    def page_items(self):
        return self.page.items

    @property
    def total_filtered(self):
        return self.page.total_count

    @property
    def current_page(self):
        return self.page.current_page

    @property
    def total_pages(self):
        return self.page.total_pages

    @property
    def selection_token(self):
        # changes whenever the rows shown at a given table index can change
        page = self.page
        filters = ",".join(f"{k}={v}" for k, v in sorted(self.query.active_filters.items()))
        return f"{page.current_page}|{page.total_count}|{self.query.search_text}|{filters}"

    @property
    def active_notifications(self):
        return self.notifications.active()

    def filter_options(self, field_name):
        sentinel = self.schema.filters.get(field_name)
        return q.filter_options(self._records, field_name, sentinel)

    # --- QUERY EVENTS ---
    def on_search(self, text):
        self.query.search_text = text or ""
        self.query.page = 1

    def on_filter(self, field_name, value):
        if field_name not in self.schema.filters:
            raise ValueError(f"{self.schema.name} has no filter on {field_name!r}")
        self.query.active_filters[field_name] = value
        self.query.page = 1

    def reset_query(self):
        self.query = q.QueryState()

    def on_page_change(self, page):
        self.query.page = q.clamp_page(page, self.total_filtered, self.schema.page_size)

    def next_page(self):
        page = self.page
        if page.has_next:
            self.query.page = page.current_page + 1

    def prev_page(self):
        page = self.page
        if page.has_prev:
            self.query.page = page.current_page - 1

    # --- MUTATIONS ---
    def _fail(self, error):
        logger.warning("[%s] %s", self.schema.name, error)
        self.notifications.notify(error.title, str(error), "error")

    def _succeed(self, event, **values):
        title, detail = self.schema.message(event, **values)
        self.notifications.notify(title, detail, "success")

    def on_create(self, record):
        id_field = self.schema.identity_field
        try:
            record = self.schema.clean(record)
            if not record.get(id_field) and self.schema.generates_identity:
                record[id_field] = self.schema.identity_policy.generate(self.identities)
            self.schema.validate(record)
            self._records = mutations.create(self._records, record, id_field)
        except CollectionError as e:
            self._fail(e)
            return None
        identity = record[id_field]
        logger.info("[%s] created %s", self.schema.name, identity)
        self._succeed("created", identity=identity)
        return dict(record)

    def on_update(self, identity, record):
        id_field = self.schema.identity_field
        try:
            if self.find(identity) is None:
                raise NotFound(identity)
            record = self.schema.clean(record)
            record[id_field] = identity
            self.schema.validate(record)
            self._records = mutations.update(self._records, identity, record, id_field)
        except CollectionError as e:
            self._fail(e)
            return False
        logger.info("[%s] updated %s", self.schema.name, identity)
        self._succeed("updated", identity=identity)
        return True

    def on_delete_requested(self, identity):
        if self.find(identity) is None:
            self._fail(NotFound(identity))
            return False
        self.pending_delete = identity
        return True

    def cancel_delete(self):
        self.pending_delete = None

    def on_delete_confirmed(self, identity):
        if self.pending_delete != identity:
            self.notifications.notify("Confirmation Required", f"Deletion of {identity} was not requested", "warning")
            return False
        self.pending_delete = None
        try:
            self._records = mutations.remove(self._records, identity, self.schema.identity_field)
        except CollectionError as e:
            self._fail(e)
            return False
        # re-clamp so a page emptied by the delete is never shown
        self.query.page = self.page.current_page
        logger.info("[%s] removed %s", self.schema.name, identity)
        self._succeed("removed", identity=identity)
        return True

    # --- EXPORT ---
    def on_export(self):
        try:
            result = build_export(self.filtered_view, self.schema.columns, self.schema.export_name,
                                  today=self.clock().date())
        except CollectionError as e:
            self._fail(e)
            return None
        logger.info("[%s] exported %d rows to %s", self.schema.name, result.row_count, result.filename)
        self._succeed("exported", count=result.row_count, filename=result.filename)
        return result

    def dismiss(self, notification_id):
        return self.notifications.dismiss(notification_id)
