import time

import pandas as pd
import streamlit as st

import config
import resources
from collection import CollectionController
from notifications import unseen

TOAST_ICONS = {"success": "✅", "error": "🚫", "warning": "⚠️"}


# --- SESSION: ONE CONTROLLER PER SCREEN ---
def get_catalogue():
    if 'catalogue' not in st.session_state:
        st.session_state.catalogue = resources.build_catalogue()
    return st.session_state.catalogue


def get_controller(name):
    if 'controllers' not in st.session_state: st.session_state.controllers = {}
    controllers = st.session_state.controllers
    if name not in controllers:
        controllers[name] = CollectionController(get_catalogue()[name])
    return controllers[name]


# --- HELPER: TABLE ROWS ---
def to_frame(schema, records):
    rows = [{c.header: c.value(r) for c in schema.columns} for r in records]
    return pd.DataFrame(rows, columns=[c.header for c in schema.columns])


# --- COMPONENT: NOTIFICATIONS ---
def flush_toasts(ctrl):
    if 'shown_toasts' not in st.session_state: st.session_state.shown_toasts = {}
    shown = st.session_state.shown_toasts.setdefault(ctrl.schema.name, set())
    for note in unseen(ctrl.active_notifications, shown):
        st.toast(f"**{note.title}**  \n{note.detail}", icon=TOAST_ICONS[note.kind])


def render_activity(ctrl):
    active = ctrl.active_notifications
    with st.sidebar.expander(f"🔔 Activity ({len(active)})"):
        if not active:
            st.caption("Nothing new.")
        for note in reversed(active):
            c_msg, c_x = st.columns([5, 1])
            c_msg.caption(f"{TOAST_ICONS[note.kind]} **{note.title}** · {note.detail}")
            if c_x.button("✕", key=f"dismiss_{note.id}"):
                ctrl.dismiss(note.id); st.rerun()


# --- COMPONENT: RECORD FORM ---
def render_form(schema, initial, key, editing=False):
    """Draw one input per form field. Returns the submitted dict or None."""
    values = {}
    with st.form(key, clear_on_submit=not editing):
        for f in schema.fields:
            current = initial.get(f.name) or ""
            label = f"{f.label} *" if f.required else f.label
            if f.name == schema.identity_field:
                if editing:
                    values[f.name] = st.text_input(label, value=current, disabled=True, key=f"{key}_{f.name}")
                    continue
                hint = "Leave blank to auto-generate" if schema.generates_identity else f.placeholder
                label = f"{f.label} *" if not schema.generates_identity else f.label
                values[f.name] = st.text_input(label, value=current, placeholder=hint, key=f"{key}_{f.name}")
            elif f.choices:
                options = list(f.choices)
                if current and current not in options: options.append(current)
                idx = options.index(current) if current in options else 0
                values[f.name] = st.selectbox(label, options, index=idx, key=f"{key}_{f.name}")
            elif f.kind == "number":
                values[f.name] = st.number_input(label, value=float(current or 0), key=f"{key}_{f.name}")
            else:
                placeholder = "YYYY-MM-DD" if f.kind == "date" else f.placeholder
                values[f.name] = st.text_input(label, value=current, placeholder=placeholder, key=f"{key}_{f.name}")

        if st.form_submit_button("Save Changes" if editing else f"Save {schema.singular}", type="primary", use_container_width=True):
            return values
    return None


# --- COMPONENT: DELETE CONFIRMATION ---
def render_delete_confirmation(ctrl):
    identity = ctrl.pending_delete
    if not identity:
        return
    st.error(f"⚠️ **Purge record?** DELETING: `{identity}`")
    c_abort, c_confirm, _ = st.columns([1, 1, 4])
    if c_abort.button("Abort", key=f"abort_{identity}"):
        ctrl.cancel_delete(); st.rerun()
    if c_confirm.button("Confirm", key=f"confirm_{identity}", type="primary"):
        # the record is only removed by on_delete_confirmed
        with st.spinner("Purging..."):
            time.sleep(config.DELETE_DELAY_SECONDS)
        ctrl.on_delete_confirmed(identity)
        st.rerun()


# --- VIEW 1: OVERVIEW ---
def show_overview():
    st.title("📊 Command Center")
    catalogue = get_catalogue()
    names = list(catalogue)
    for start in range(0, len(names), 4):
        cols = st.columns(4)
        for col, name in zip(cols, names[start:start + 4]):
            schema = catalogue[name]
            col.metric(f"{schema.icon} {schema.title}", len(get_controller(name)))
    st.caption("Every screen keeps its own records for this session only. Reloading resets to seed data.")


# --- VIEW 2: COLLECTION SCREEN ---
def show_collection(name):
    ctrl = get_controller(name)
    schema = ctrl.schema
    flush_toasts(ctrl)
    render_activity(ctrl)
    st.title(f"{schema.icon} {schema.title}")

    # Search / filters / export
    filter_fields = list(schema.filters)
    cols = st.columns([2] + [1] * len(filter_fields) + [1])
    search = cols[0].text_input("🔍 Search", value=ctrl.query.search_text, key=f"{name}_search",
                                placeholder=", ".join(schema.searchable_fields))
    if search != ctrl.query.search_text: ctrl.on_search(search)

    for col, field_name in zip(cols[1:], filter_fields):
        options = ctrl.filter_options(field_name)
        current = ctrl.query.active_filters.get(field_name, options[0])
        idx = options.index(current) if current in options else 0
        label = next((f.label for f in schema.fields if f.name == field_name), field_name)
        picked = col.selectbox(label, options, index=idx, key=f"{name}_filter_{field_name}")
        if picked != current: ctrl.on_filter(field_name, picked)

    if cols[-1].button("⬇ Export CSV", key=f"{name}_export"):
        result = ctrl.on_export()
        if result:
            cols[-1].download_button("Download CSV", data=result.to_bytes(), file_name=result.filename,
                                     mime=result.mime, key=f"{name}_download")
        flush_toasts(ctrl)

    render_delete_confirmation(ctrl)

    # Table + pagination
    page = ctrl.page
    selected = None
    if page.items:
        event = st.dataframe(to_frame(schema, page.items), on_select="rerun", selection_mode="single-row",
                             use_container_width=True, hide_index=True, key=f"{name}_table_{ctrl.selection_token}")
        rows = event.selection.rows
        if rows and rows[0] < len(page.items):
            selected = page.items[rows[0]]
    else:
        st.warning("No records found.")

    p1, p2, p3 = st.columns([1, 8, 1])
    if p1.button("◀ Prev", key=f"{name}_prev", disabled=not page.has_prev):
        ctrl.prev_page(); st.rerun()
    if p3.button("Next ▶", key=f"{name}_next", disabled=not page.has_next):
        ctrl.next_page(); st.rerun()
    p2.caption(f"Showing {page.first_index}–{page.last_index} of {page.total_count} · "
               f"page {page.current_page} of {page.total_pages}")

    st.divider()
    t_new, t_edit = st.tabs([f"➕ New {schema.singular}", "✏️ Edit Selected"])

    with t_new:
        submitted = render_form(schema, schema.blank_record(), key=f"{name}_create")
        if submitted is not None:
            if ctrl.on_create(submitted): st.rerun()
            flush_toasts(ctrl)

    with t_edit:
        if not selected:
            st.info("Select a row in the table to edit or delete it.")
            return
        identity = selected[schema.identity_field]
        submitted = render_form(schema, selected, key=f"{name}_edit_{identity}", editing=True)
        if submitted is not None:
            ctrl.on_update(identity, submitted)
            st.rerun()
        if st.button("🗑️ Delete", key=f"{name}_delete_{identity}", type="secondary"):
            ctrl.on_delete_requested(identity); st.rerun()
