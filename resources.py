import copy

from export import Column
from identity import FieldPolicy, RandomNumberPolicy, RandomTokenPolicy, SequencePolicy, TimestampPolicy
from schema import EntitySchema, FormField

ASSET_TYPES = ["Laptop", "Mobile", "Peripheral", "Audio"]
ASSET_STATUSES = ["Active", "In Repair", "Inactive", "Retired"]
DEPARTMENTS = ["Engineering", "Marketing", "Operations", "HR"]
USER_ROLES = ["Administrator", "Manager", "User", "Auditor"]
USER_STATUSES = ["Active", "Inactive"]
BLOCK_STATES = ["Active", "Maintenance", "Restricted", "Offline"]
TRANSFER_STATUSES = ["Pending", "In Transit", "Completed"]
TRANSFER_PRIORITIES = ["Standard", "High"]
DISPOSAL_METHODS = ["Physical Destruction", "Secure Recycle", "Eco-Recycle", "Donation"]
ARCHIVE_TYPES = ["Financial", "HR", "Technical", "Legal", "Document", "Database"]
REPORT_TYPES = ["PDF", "CSV", "JSON"]

# --- SEED DATA ---
SEED_ASSETS = [
    {"id": "AST-001", "name": "MacBook Pro", "type": "Laptop", "status": "Active",
     "purchase_date": "2023-10-02", "assigned_to": "Edem Quist"},
    {"id": "AST-002", "name": "Dell Monitor", "type": "Peripheral", "status": "In Repair",
     "purchase_date": "2022-06-18", "assigned_to": ""},
    {"id": "AST-003", "name": "iPhone 15", "type": "Mobile", "status": "Active",
     "purchase_date": "2024-01-08", "assigned_to": "Sarah Smith"},
    {"id": "AST-102", "name": "Jabra Evolve Headset", "type": "Audio", "status": "Retired",
     "purchase_date": "2020-03-11", "assigned_to": ""},
]

SEED_ASSET_USERS = [
    {"email": "edem@sys-admin.io", "name": "Edem Quist", "role": "Administrator", "status": "Active",
     "department": "Core Engineering", "asset_name": "MacBook Pro M3", "asset_id": "SYS-MBP-992",
     "date": "2024-01-15"},
    {"email": "sarah@creative.io", "name": "Sarah Smith", "role": "Lead Designer", "status": "Active",
     "department": "Design", "asset_name": "iPad Pro", "asset_id": "SYS-IPD-441", "date": "2024-02-10"},
]

SEED_IDENTITIES = [
    {"email": "edem@sys-admin.io", "name": "Edem", "role": "Administrator", "status": "Active",
     "location": "Accra, GH"},
    {"email": "sarah@sys-admin.io", "name": "Sarah Smith", "role": "Manager", "status": "Active",
     "location": "London, UK"},
]

SEED_BLOCKS = [
    {"block_id": "BLK-Z0V5RR8R8", "name": "Active"},
    {"block_id": "BLK-A0V82C8R8", "name": "Maintenance"},
    {"block_id": "BLK-Y0V5RR8R8", "name": "Restricted"},
    {"block_id": "BLK-F0V5RR588", "name": "Active"},
    {"block_id": "BLK-G0V5RR8R8", "name": "Offline"},
]

SEED_DEPARTMENTS = [
    {"id": "DEPT-K3X9QZ", "name": "IT Department", "manager": "Edem Quist", "location": "HQ Floor 2",
     "status": "Active"},
    {"id": "DEPT-K3XA7M", "name": "Finance", "manager": "Ama Owusu", "location": "HQ Floor 4",
     "status": "Active"},
    {"id": "DEPT-K3XB2P", "name": "Field Operations", "manager": "Kojo Mensah", "location": "Tema Depot",
     "status": "Inactive"},
]

SEED_ALLOCATIONS = [
    {"id": "ALC-101", "asset_id": "AST-001", "asset_name": "MacBook Pro", "user_id": "USR-01",
     "user_name": "Edem Quist", "date": "2023-11-05", "department": "Engineering"},
    {"id": "ALC-102", "asset_id": "AST-003", "asset_name": "iPhone 15", "user_id": "USR-09",
     "user_name": "Sarah Smith", "date": "2024-01-12", "department": "Marketing"},
]

SEED_TRANSFERS = [
    {"id": "TRF-9901", "asset_id": "AST-442", "asset_name": "Dell Server Rack", "from_location": "Data Center A",
     "to_location": "DR Site", "status": "In Transit", "date": "2024-03-10", "priority": "High"},
    {"id": "TRF-9902", "asset_id": "AST-109", "asset_name": "Workstation Bundle",
     "from_location": "Main Warehouse", "to_location": "Branch North", "status": "Completed",
     "date": "2024-03-08", "priority": "Standard"},
]

SEED_DISPOSALS = [
    {"id": "DISP-552", "asset_id": "AST-102", "method": "Eco-Recycle", "company": "GreenTech Solutions",
     "date": "2024-06-15"},
]

SEED_DECOMMISSIONS = [
    {"id": "DEC-001", "asset_id": "AST-882", "reason": "End of Life", "decommission_date": "2024-05-12",
     "approved_by": "Admin"},
]

SEED_ARCHIVES = [
    {"id": "ARC-2023-001", "file_name": "Q4_Financial_Audit.zip", "type": "Financial",
     "date_archived": "2023-12-15", "size": "154MB"},
    {"id": "ARC-2024-002", "file_name": "Employee_Records_Legacy.db", "type": "HR",
     "date_archived": "2024-01-20", "size": "2.4GB"},
    {"id": "ARC-2024-003", "file_name": "Project_Nebula_Source.tar.gz", "type": "Technical",
     "date_archived": "2024-02-10", "size": "890MB"},
]

SEED_REPORTS = [
    {"id": "REP-001", "title": "Q1 Asset Depreciation", "date": "2024-03-01", "type": "PDF", "size": "2.4 MB"},
    {"id": "REP-002", "title": "Security Audit Log", "date": "2024-03-05", "type": "CSV", "size": "842 KB"},
    {"id": "REP-003", "title": "Hardware Lifecycle Summary", "date": "2024-03-10", "type": "PDF",
     "size": "4.1 MB"},
]


def _allocation_fields():
    return [
        FormField("user_name", "User Name", required=True),
        FormField("user_id", "User ID", placeholder="USR-00"),
        FormField("asset_name", "Asset Name", required=True),
        FormField("asset_id", "Asset ID", required=True, placeholder="AST-000"),
        FormField("department", "Department", choices=DEPARTMENTS),
        FormField("date", "Date", kind="date"),
    ]


def _allocation_columns(id_header):
    return [
        Column(id_header, "id"),
        Column("User Name", "user_name"),
        Column("User ID", "user_id"),
        Column("Asset Name", "asset_name"),
        Column("Asset ID", "asset_id"),
        Column("Department", "department"),
        Column("Date", "date"),
    ]


def build_catalogue(rng=None, clock=None):
    """Fresh schemas and seed copies for every screen, in navigation order."""
    schemas = [
        EntitySchema(
            name="assets", title="Asset Registry", singular="Asset", icon="📦",
            identity_field="id",
            identity_policy=RandomNumberPolicy("AST", rng=rng),
            searchable_fields=("name", "id"),
            filters={"type": "All Types", "status": "All Statuses"},
            fields=[
                FormField("id", "Asset ID", placeholder="AST-XXX"),
                FormField("name", "Asset Name", required=True),
                FormField("type", "Type", required=True, choices=ASSET_TYPES),
                FormField("status", "Status", required=True, choices=ASSET_STATUSES),
                FormField("purchase_date", "Purchase Date", kind="date"),
                FormField("assigned_to", "Assigned To"),
            ],
            columns=[
                Column("Asset ID", "id"),
                Column("Name", "name"),
                Column("Type", "type"),
                Column("Status", "status"),
                Column("Purchase Date", "purchase_date", default="N/A"),
                Column("Assigned To", "assigned_to", default="Unassigned"),
            ],
            messages={"created": ("Asset Registered", "{identity} added to inventory")},
            seed=SEED_ASSETS,
        ),
        EntitySchema(
            name="asset_users", title="Asset Users", singular="User", icon="🧑‍💻",
            identity_field="email",
            identity_policy=FieldPolicy("Email"),
            searchable_fields=("name", "email", "department"),
            filters={"status": "All Statuses"},
            fields=[
                FormField("email", "Email", placeholder="name@company.io"),
                FormField("name", "Full Name", required=True),
                FormField("role", "Role", required=True),
                FormField("status", "Status", required=True, choices=USER_STATUSES),
                FormField("department", "Department"),
                FormField("asset_name", "Asset Name"),
                FormField("asset_id", "Asset ID"),
                FormField("date", "Assigned On", kind="date"),
            ],
            columns=[
                Column("Name", "name"),
                Column("Email", "email"),
                Column("Role", "role"),
                Column("Department", "department"),
                Column("Status", "status"),
                Column("Asset ID", "asset_id", default="N/A"),
            ],
            export_name="identity_registry",
            messages={"removed": ("Identity Purged", "{identity} removed from central registry")},
            seed=SEED_ASSET_USERS,
        ),
        EntitySchema(
            name="identities", title="Identity Registry", singular="Identity", icon="🪪",
            identity_field="email",
            identity_policy=FieldPolicy("Email"),
            searchable_fields=("name", "email"),
            filters={"role": "All Roles"},
            fields=[
                FormField("email", "Email", placeholder="name@sys-admin.io"),
                FormField("name", "Name", required=True),
                FormField("role", "Role", required=True, choices=USER_ROLES),
                FormField("status", "Status", required=True, choices=USER_STATUSES),
                FormField("location", "Location"),
            ],
            columns=[
                Column("Name", "name"),
                Column("Email", "email"),
                Column("Role", "role"),
                Column("Status", "status"),
                Column("Location", "location", default="N/A"),
            ],
            export_name="auth_users",
            seed=SEED_IDENTITIES,
        ),
        EntitySchema(
            name="blocks", title="System Blocks", singular="Block", icon="🧱",
            identity_field="block_id",
            identity_policy=RandomTokenPolicy("BLK", rng=rng),
            searchable_fields=("name", "block_id"),
            filters={"name": "All States"},
            fields=[
                FormField("block_id", "Block ID", placeholder="BLK-XXXXXXXXX"),
                FormField("name", "Status/Name", required=True, choices=BLOCK_STATES),
            ],
            columns=[Column("Block ID", "block_id"), Column("Status/Name", "name")],
            export_name="system_blocks",
            seed=SEED_BLOCKS,
        ),
        EntitySchema(
            name="departments", title="Departments", singular="Department", icon="🏢",
            identity_field="id",
            identity_policy=TimestampPolicy("DEPT", rng=rng, clock=clock),
            searchable_fields=("name", "id", "manager"),
            filters={"status": "All Statuses"},
            fields=[
                FormField("id", "Department ID", placeholder="DEPT-XXXXXX"),
                FormField("name", "Name", required=True),
                FormField("manager", "Manager"),
                FormField("location", "Location"),
                FormField("status", "Status", required=True, choices=USER_STATUSES),
            ],
            columns=[
                Column("Department ID", "id"),
                Column("Name", "name"),
                Column("Manager", "manager", default="N/A"),
                Column("Location", "location", default="N/A"),
                Column("Status", "status"),
            ],
            seed=SEED_DEPARTMENTS,
        ),
        EntitySchema(
            name="allocations", title="Allocations", singular="Allocation", icon="🔗",
            identity_field="id",
            identity_policy=RandomNumberPolicy("ALC", rng=rng),
            searchable_fields=("user_name", "asset_name", "asset_id"),
            page_size=5,
            fields=[FormField("id", "Allocation ID", placeholder="ALC-XXX")] + _allocation_fields(),
            columns=_allocation_columns("Allocation ID"),
            messages={"created": ("Asset Allocated", "{identity} assigned")},
            seed=SEED_ALLOCATIONS,
        ),
        EntitySchema(
            name="audits", title="Audit", singular="Audit Entry", icon="🔍",
            identity_field="id",
            identity_policy=RandomNumberPolicy("ALC", rng=rng),
            searchable_fields=("user_name", "asset_name", "asset_id", "department"),
            filters={"department": "All Departments"},
            fields=[FormField("id", "Audit ID", placeholder="ALC-XXX")] + _allocation_fields(),
            columns=_allocation_columns("Audit ID"),
            messages={"removed": ("Access Revoked", "{identity} allocation revoked")},
            seed=SEED_ALLOCATIONS,
        ),
        EntitySchema(
            name="transfers", title="Transfers", singular="Transfer", icon="🚚",
            identity_field="id",
            identity_policy=RandomNumberPolicy("TRF", digits=4, rng=rng),
            searchable_fields=("asset_name", "id"),
            filters={"status": "All Statuses"},
            fields=[
                FormField("id", "Transfer ID", placeholder="TRF-XXXX"),
                FormField("asset_id", "Asset ID", required=True, placeholder="AST-000"),
                FormField("asset_name", "Asset", required=True),
                FormField("from_location", "Origin", required=True),
                FormField("to_location", "Destination", required=True),
                FormField("status", "Status", required=True, choices=TRANSFER_STATUSES),
                FormField("priority", "Priority", choices=TRANSFER_PRIORITIES),
                FormField("date", "Date", kind="date"),
            ],
            columns=[
                Column("ID", "id"),
                Column("Asset", "asset_name"),
                Column("Origin", "from_location"),
                Column("Destination", "to_location"),
                Column("Status", "status"),
                Column("Date", "date"),
            ],
            export_name="logistics_export",
            seed=SEED_TRANSFERS,
        ),
        EntitySchema(
            name="disposals", title="Disposals", singular="Disposal", icon="♻️",
            identity_field="id",
            identity_policy=RandomNumberPolicy("DISP", rng=rng),
            searchable_fields=("id", "asset_id", "company"),
            filters={"method": "All Methods"},
            fields=[
                FormField("id", "Disposal ID", placeholder="DISP-XXX"),
                FormField("asset_id", "Asset ID", required=True, placeholder="AST-XXX"),
                FormField("method", "Method", required=True, choices=DISPOSAL_METHODS),
                FormField("company", "Company", required=True),
                FormField("date", "Date", kind="date"),
            ],
            columns=[
                Column("Disposal ID", "id"),
                Column("Asset ID", "asset_id"),
                Column("Method", "method"),
                Column("Company", "company"),
                Column("Date", "date", default="N/A"),
            ],
            export_name="disposal_manifest",
            messages={"removed": ("Record Purged", "Disposal entry {identity} removed from registry")},
            seed=SEED_DISPOSALS,
        ),
        EntitySchema(
            name="decommissions", title="Decommission", singular="Protocol", icon="🔌",
            identity_field="id",
            identity_policy=RandomNumberPolicy("DEC", digits=4, min_digits=3, rng=rng),
            searchable_fields=("id", "asset_id", "reason"),
            fields=[
                FormField("id", "Protocol ID", placeholder="DEC-XXXX"),
                FormField("asset_id", "Asset Reference", required=True, placeholder="AST-XXX"),
                FormField("reason", "Reason", required=True),
                FormField("decommission_date", "Date", kind="date"),
                FormField("approved_by", "Approved By"),
            ],
            columns=[
                Column("Protocol ID", "id"),
                Column("Asset Reference", "asset_id"),
                Column("Reason", "reason"),
                Column("Date", "decommission_date", default="N/A"),
                Column("Approved By", "approved_by", default="N/A"),
            ],
            export_name="decommission_audit",
            messages={"created": ("Protocol Executed", "{identity} marked for decommissioning")},
            seed=SEED_DECOMMISSIONS,
        ),
        EntitySchema(
            name="archives", title="Cold Storage", singular="Archive", icon="🗄️",
            identity_field="id",
            identity_policy=RandomNumberPolicy("ARC", with_year=True, rng=rng, clock=clock),
            searchable_fields=("file_name", "id"),
            filters={"type": "All"},
            fields=[
                FormField("id", "Record ID", placeholder="ARC-YYYY-XXX"),
                FormField("file_name", "File Name", required=True),
                FormField("type", "Classification", required=True, choices=ARCHIVE_TYPES),
                FormField("date_archived", "Archive Date", kind="date"),
                FormField("size", "Size"),
            ],
            columns=[
                Column("Record ID", "id"),
                Column("File Name", "file_name"),
                Column("Classification", "type"),
                Column("Archive Date", "date_archived"),
                Column("Size", "size"),
            ],
            export_name="vault_export",
            messages={
                "created": ("File Archived", "{identity} committed to cold storage"),
                "updated": ("Vault Updated", "{identity} metadata synchronized"),
                "removed": ("Archive Purged", "Record {identity} removed from vault"),
            },
            seed=SEED_ARCHIVES,
        ),
        EntitySchema(
            name="reports", title="Reports", singular="Report", icon="📑",
            identity_field="id",
            identity_policy=SequencePolicy("REP"),
            searchable_fields=("title", "id"),
            filters={"type": "All Formats"},
            fields=[
                FormField("id", "Report ID", placeholder="REP-XXX"),
                FormField("title", "Title", required=True),
                FormField("type", "Format", required=True, choices=REPORT_TYPES),
                FormField("date", "Date", kind="date"),
                FormField("size", "Size"),
            ],
            columns=[
                Column("Report ID", "id"),
                Column("Title", "title"),
                Column("Format", "type"),
                Column("Date", "date"),
                Column("Size", "size"),
            ],
            messages={"created": ("Report Generated", "{identity} queued")},
            seed=SEED_REPORTS,
        ),
    ]
    for schema in schemas:
        schema.seed = copy.deepcopy(schema.seed)
    return {schema.name: schema for schema in schemas}
