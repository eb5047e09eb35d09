"""The nine DDS phase catalogs.

Day offsets are measured from project start for a new-land project and
line up with the Annexure A milestones (concept closure by day 90, DD
closure by day 290, first VFCs from day 335). Existing-land, height and
consultant adjustments are applied by the engine, never baked in here.

Concept, Liaison, SLDs, SD and Tender are issued once per project. DD,
Detailed Calculations, Builder's Work and VFC are issued per tower and
shifted by the tower stagger.
"""

from __future__ import annotations

from ddspolicy.models.catalog import DeliverableTemplate, PhaseCatalog
from ddspolicy.models.enums import CanonicalLevel, DdsPhase, FeatureKey, Scope

# ---------------------------------------------------------------------------
# A - Concept (project)
# ---------------------------------------------------------------------------

CONCEPT_TEMPLATES: tuple[DeliverableTemplate, ...] = (
    DeliverableTemplate(
        sr_no=1,
        name="Architectural Concept Input",
        dependency_text="Appointment of key consultants",
        stakeholders="Architect",
        day_offset_new=15,
        duration_days=30,
        trade="Architecture",
    ),
    DeliverableTemplate(
        sr_no=2,
        name="MEP Concept Design Report",
        remarks="Design basis, system options and utility strategy",
        dependency_text="Architectural concept input",
        stakeholders="MEP Consultant",
        day_offset_new=35,
        duration_days=28,
        trade="MEP",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=3,
        name="Utility Load Estimation (Power, Water, Sewage)",
        dependency_text="Area statement",
        stakeholders="MEP Consultant, Liaison",
        day_offset_new=45,
        duration_days=21,
        trade="MEP",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=4,
        name="Services Space Planning (Shafts, Plant Rooms, Risers)",
        dependency_text="Architectural concept input",
        stakeholders="Architect, MEP Consultant",
        day_offset_new=50,
        duration_days=25,
        trade="MEP",
    ),
    DeliverableTemplate(
        sr_no=5,
        name="Concept Design Workshop",
        remarks="Architecture, structure and MEP review",
        stakeholders="Design, Architect, Structure Consultant, MEP Consultant",
        day_offset_new=75,
        duration_days=10,
        trade="Workshop",
    ),
    DeliverableTemplate(
        sr_no=6,
        name="Concept Design Closure",
        dependency_text="Concept design workshop",
        stakeholders="Design",
        day_offset_new=90,
        duration_days=15,
        trade="MEP",
    ),
)

# ---------------------------------------------------------------------------
# B - Liaison (project)
# ---------------------------------------------------------------------------

LIAISON_TEMPLATES: tuple[DeliverableTemplate, ...] = (
    DeliverableTemplate(
        sr_no=1,
        name="Environmental Clearance MEP Inputs",
        dependency_text="Utility load estimation",
        stakeholders="Liaison, MEP Consultant",
        day_offset_new=95,
        duration_days=30,
        trade="MEP",
    ),
    DeliverableTemplate(
        sr_no=2,
        name="Power Supply Load Sanction Application",
        dependency_text="Utility load estimation",
        stakeholders="Liaison, Electrical",
        day_offset_new=100,
        duration_days=30,
        trade="Electrical",
    ),
    DeliverableTemplate(
        sr_no=3,
        name="Provisional Fire NOC Submission",
        remarks="Fire fighting concept and refuge planning",
        dependency_text="Concept design closure",
        stakeholders="Liaison, Fire Consultant",
        day_offset_new=105,
        duration_days=45,
        trade="Fire Fighting",
    ),
    DeliverableTemplate(
        sr_no=4,
        name="Water Supply & Sewerage Connection Application",
        dependency_text="Utility load estimation",
        stakeholders="Liaison, PHE",
        day_offset_new=110,
        duration_days=30,
        trade="PHE",
    ),
    DeliverableTemplate(
        sr_no=5,
        name="Lift Licence Application",
        dependency_text="Lift traffic analysis",
        stakeholders="Liaison, Lift Vendor",
        day_offset_new=120,
        duration_days=30,
        trade="Lifts",
    ),
)

# ---------------------------------------------------------------------------
# C - SLDs (project)
# ---------------------------------------------------------------------------

SLD_TEMPLATES: tuple[DeliverableTemplate, ...] = (
    DeliverableTemplate(
        sr_no=1,
        name="HT/LT Power Distribution SLD",
        dependency_text="Power supply load sanction application",
        stakeholders="MEP Consultant",
        day_offset_new=120,
        duration_days=21,
        trade="Electrical",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=2,
        name="DG Backup SLD",
        dependency_text="HT/LT power distribution SLD",
        stakeholders="MEP Consultant",
        day_offset_new=130,
        duration_days=14,
        trade="Electrical",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=3,
        name="Fire Fighting Pump Room Schematic",
        dependency_text="Provisional fire NOC submission",
        stakeholders="MEP Consultant",
        day_offset_new=130,
        duration_days=14,
        trade="Fire Fighting",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=4,
        name="Water Supply Line Diagram",
        stakeholders="MEP Consultant",
        day_offset_new=130,
        duration_days=14,
        trade="PHE",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=5,
        name="ELV & Security Riser Diagram",
        stakeholders="MEP Consultant",
        day_offset_new=135,
        duration_days=14,
        trade="ELV",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=6,
        name="SLD Review & Freeze",
        stakeholders="Design, MEP Consultant",
        day_offset_new=150,
        duration_days=10,
        trade="Workshop",
    ),
)

# ---------------------------------------------------------------------------
# D - SD (project)
# ---------------------------------------------------------------------------

SD_TEMPLATES: tuple[DeliverableTemplate, ...] = (
    DeliverableTemplate(
        sr_no=1,
        name="Schematic Design Input (Architecture & Structure)",
        dependency_text="Concept design closure",
        stakeholders="Architect, Structure Consultant",
        day_offset_new=140,
        duration_days=14,
        trade="Architecture",
    ),
    DeliverableTemplate(
        sr_no=2,
        name="MEP Schematic Design Report",
        dependency_text="Schematic design input",
        stakeholders="MEP Consultant",
        day_offset_new=155,
        duration_days=21,
        trade="MEP",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=3,
        name="Plant Room & Shaft Sizing Freeze",
        dependency_text="SLD review & freeze",
        stakeholders="Architect, MEP Consultant",
        day_offset_new=165,
        duration_days=14,
        trade="MEP",
    ),
    DeliverableTemplate(
        sr_no=4,
        name="SD Coordination Workshop",
        stakeholders="Design, Architect, Structure Consultant, MEP Consultant",
        day_offset_new=175,
        duration_days=7,
        trade="Workshop",
    ),
    DeliverableTemplate(
        sr_no=5,
        name="Concept Closure for All Packages",
        remarks="Annexure A milestone",
        dependency_text="SD coordination workshop",
        stakeholders="Design",
        day_offset_new=180,
        duration_days=10,
        trade="MEP",
    ),
)

# ---------------------------------------------------------------------------
# E - DD (per tower)
# ---------------------------------------------------------------------------

DD_TEMPLATES: tuple[DeliverableTemplate, ...] = (
    DeliverableTemplate(
        sr_no=1,
        name="DD Architectural Input",
        dependency_text="Concept closure for all packages",
        stakeholders="Architect",
        day_offset_new=190,
        duration_days=14,
        trade="Architecture",
    ),
    DeliverableTemplate(
        sr_no=2,
        name="DD Structural Input",
        dependency_text="DD architectural input",
        stakeholders="Structure Consultant",
        day_offset_new=200,
        duration_days=14,
        trade="Structure",
    ),
    DeliverableTemplate(
        sr_no=3,
        name="DD Package",
        remarks="Layouts, schematics and equipment schedules for all MEP trades",
        dependency_text="DD architectural and structural input",
        stakeholders="MEP Consultant",
        day_offset_new=210,
        duration_days=42,
        trade="MEP",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=4,
        name="Basement Services Coordination",
        dependency_text="DD package",
        stakeholders="Architect, MEP Consultant",
        day_offset_new=225,
        duration_days=21,
        trade="MEP",
        conditional=FeatureKey.HAS_BASEMENT,
    ),
    DeliverableTemplate(
        sr_no=5,
        name="Podium Services Coordination",
        dependency_text="DD package",
        stakeholders="Architect, MEP Consultant",
        day_offset_new=230,
        duration_days=21,
        trade="MEP",
        conditional=FeatureKey.HAS_PODIUM,
    ),
    DeliverableTemplate(
        sr_no=6,
        name="DD Coordination Workshop",
        stakeholders="Design, Architect, Structure Consultant, MEP Consultant",
        day_offset_new=260,
        duration_days=14,
        trade="Workshop",
    ),
    DeliverableTemplate(
        sr_no=7,
        name="DD Closure + Budget Handover",
        remarks="Annexure A milestone",
        dependency_text="DD coordination workshop",
        stakeholders="Design, Cost Planning",
        day_offset_new=290,
        duration_days=10,
        trade="MEP",
    ),
)

# ---------------------------------------------------------------------------
# F - Detailed Calculations (per tower)
# ---------------------------------------------------------------------------

CALCULATION_TEMPLATES: tuple[DeliverableTemplate, ...] = (
    DeliverableTemplate(
        sr_no=1,
        name="Electrical Load Calculation (Normal & Emergency)",
        dependency_text="DD package",
        stakeholders="MEP Consultant",
        day_offset_new=215,
        duration_days=21,
        trade="Electrical",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=2,
        name="Cable Sizing & Voltage Drop",
        dependency_text="Electrical load calculation",
        stakeholders="MEP Consultant",
        day_offset_new=230,
        duration_days=14,
        trade="Electrical",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=3,
        name="Short Circuit & Earthing Calculation",
        dependency_text="HT/LT power distribution SLD",
        stakeholders="MEP Consultant",
        day_offset_new=230,
        duration_days=14,
        trade="Electrical",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=4,
        name="Lightning Protection Risk Assessment",
        stakeholders="MEP Consultant",
        day_offset_new=235,
        duration_days=7,
        trade="Lightning Protection",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=5,
        name="Water Demand & Tank Sizing",
        dependency_text="Area statement",
        stakeholders="MEP Consultant",
        day_offset_new=215,
        duration_days=14,
        trade="PHE",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=6,
        name="PHE Pump Head Calculation",
        dependency_text="Water demand & tank sizing",
        stakeholders="MEP Consultant",
        day_offset_new=230,
        duration_days=14,
        trade="PHE",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=7,
        name="Fire Pump & Hydraulic Calculation",
        dependency_text="Provisional fire NOC submission",
        stakeholders="MEP Consultant",
        day_offset_new=220,
        duration_days=21,
        trade="Fire Fighting",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=8,
        name="HVAC Heat Load Calculation",
        dependency_text="DD architectural input",
        stakeholders="MEP Consultant",
        day_offset_new=220,
        duration_days=21,
        trade="HVAC",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=9,
        name="Basement Ventilation & Smoke Exhaust Calculation",
        stakeholders="MEP Consultant",
        day_offset_new=235,
        duration_days=14,
        trade="HVAC",
        conditional=FeatureKey.HAS_BASEMENT,
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=10,
        name="Staircase & Lift Well Pressurisation Calculation",
        stakeholders="MEP Consultant",
        day_offset_new=240,
        duration_days=14,
        trade="HVAC",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=11,
        name="Swimming Pool Filtration Calculation",
        stakeholders="MEP Consultant, Pool Vendor",
        day_offset_new=245,
        duration_days=14,
        trade="PHE",
        conditional=FeatureKey.HAS_SWIMMING_POOL,
        scope=Scope.CONSULTANT,
    ),
)

# ---------------------------------------------------------------------------
# G - Builder's Work (per tower)
# ---------------------------------------------------------------------------

BUILDERS_WORK_TEMPLATES: tuple[DeliverableTemplate, ...] = (
    DeliverableTemplate(
        sr_no=1,
        name="BW Drawings - Foundation & Plinth Sleeves",
        dependency_text="Formwork drawings",
        stakeholders="MEP Consultant, Structure Consultant",
        day_offset_new=320,
        duration_days=14,
        trade="Builders Work",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=2,
        name="BW Drawings - Basement",
        stakeholders="MEP Consultant, Structure Consultant",
        day_offset_new=325,
        duration_days=14,
        trade="Builders Work",
        conditional=FeatureKey.HAS_BASEMENT,
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=3,
        name="BW Drawings - Podium",
        stakeholders="MEP Consultant, Structure Consultant",
        day_offset_new=335,
        duration_days=14,
        trade="Builders Work",
        conditional=FeatureKey.HAS_PODIUM,
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=4,
        name="BW Drawings - Stilt / Ground Floor",
        stakeholders="MEP Consultant, Structure Consultant",
        day_offset_new=345,
        duration_days=14,
        trade="Builders Work",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=5,
        name="BW Drawings - Typical Floor",
        dependency_text="Shell drawings coordination closure",
        stakeholders="MEP Consultant, Structure Consultant",
        day_offset_new=365,
        duration_days=14,
        trade="Builders Work",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=6,
        name="BW Drawings - Refuge Floor",
        stakeholders="MEP Consultant, Structure Consultant",
        day_offset_new=380,
        duration_days=14,
        trade="Builders Work",
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=7,
        name="BW Drawings - Penthouse Level",
        stakeholders="MEP Consultant, Structure Consultant",
        day_offset_new=395,
        duration_days=14,
        trade="Builders Work",
        conditional=FeatureKey.HAS_PENTHOUSE,
        scope=Scope.CONSULTANT,
    ),
    DeliverableTemplate(
        sr_no=8,
        name="BW Drawings - Terrace & OHT Level",
        stakeholders="MEP Consultant, Structure Consultant",
        day_offset_new=410,
        duration_days=14,
        trade="Builders Work",
        scope=Scope.CONSULTANT,
    ),
)

# ---------------------------------------------------------------------------
# H - Tender (project, gated)
# ---------------------------------------------------------------------------


def _tender(
    sr_no: int,
    name: str,
    trade: str,
    week_offset: int,
    duration_weeks: int,
    conditional: FeatureKey | None = None,
) -> DeliverableTemplate:
    # Tender timings are published in weeks from project start.
    return DeliverableTemplate(
        sr_no=sr_no,
        name=name,
        dependency_text="DD closure for the package",
        stakeholders="CPT, Design",
        day_offset_new=week_offset * 7,
        duration_days=duration_weeks * 7,
        trade=trade,
        conditional=conditional,
    )


TENDER_TEMPLATES: tuple[DeliverableTemplate, ...] = (
    _tender(1, "Earthing Tender (Micro Pile)", "Electrical", 21, 4),
    _tender(2, "Electrical Concealed Tender", "Electrical", 28, 6),
    _tender(3, "PHE Tender", "PHE", 36, 7),
    _tender(4, "Fire Fighting Tender", "Fire Fighting", 35, 6),
    _tender(5, "FAVA Tender", "FAVA", 39, 9),
    _tender(6, "HVAC Tender", "HVAC", 42, 12),
    _tender(7, "Security (CCTV, Access Control, Intercom) Tender", "Security", 43, 13),
    _tender(8, "Electrical Tender", "Electrical", 35, 6),
    _tender(9, "VDP Tender", "ELV", 42, 12),
    _tender(10, "IBS & FTTH RFP", "ELV", 42, 12),
    _tender(11, "Lifts Tender", "Lifts", 44, 14),
    _tender(12, "Rooftop Solar / Hot Water Tender", "PHE", 45, 15),
    _tender(13, "Centralized Ventilation Tender", "HVAC", 40, 10),
    _tender(14, "OWC Tender", "PHE", 44, 14),
    _tender(15, "STP Tender", "PHE", 44, 14),
    _tender(16, "WTP Tender", "PHE", 44, 14),
    _tender(17, "STP & OWC De-Odorization Tender", "PHE", 45, 15),
    _tender(18, "DG Tender", "Electrical", 46, 16),
    _tender(19, "PNG Tender", "PHE", 47, 17),
    _tender(20, "RWH Tender", "PHE", 48, 18),
    _tender(21, "Swimming Pool Tender", "PHE", 35, 5, FeatureKey.HAS_SWIMMING_POOL),
    _tender(22, "Fitout Tender", "Interior Design", 50, 10, FeatureKey.HAS_FITOUT),
)

# ---------------------------------------------------------------------------
# I - VFCs (per tower, one row per level)
# ---------------------------------------------------------------------------


def _vfc(
    sr_no: int,
    name: str,
    level: CanonicalLevel,
    day_offset_new: int,
    conditional: FeatureKey | None = None,
) -> DeliverableTemplate:
    return DeliverableTemplate(
        sr_no=sr_no,
        name=name,
        level=level,
        remarks="All MEP trades",
        dependency_text="Architecture and structure VFC for the level",
        stakeholders="Architect, Structure Consultant, MEP Consultant",
        day_offset_new=day_offset_new,
        duration_days=14,
        trade="MEP",
        conditional=conditional,
        scope=Scope.CONSULTANT,
    )


VFC_TEMPLATES: tuple[DeliverableTemplate, ...] = (
    _vfc(1, "Basement VFC", CanonicalLevel.BASEMENT, 335, FeatureKey.HAS_BASEMENT),
    _vfc(2, "Plinth Level VFC", CanonicalLevel.PLINTH_LEVEL, 350),
    _vfc(3, "Podium Level VFC", CanonicalLevel.PODIUM_LEVEL, 365, FeatureKey.HAS_PODIUM),
    _vfc(4, "Ground Floor VFC", CanonicalLevel.GROUND_FLOOR, 395),
    _vfc(5, "Typical Floor VFC", CanonicalLevel.TYPICAL_FLOOR, 425),
    _vfc(6, "Refuge Floor VFC", CanonicalLevel.REFUGE_FLOOR, 455),
    _vfc(
        7, "Penthouse Level VFC", CanonicalLevel.PENTHOUSE_LEVEL, 500,
        FeatureKey.HAS_PENTHOUSE,
    ),
    _vfc(8, "Terrace Floor VFC", CanonicalLevel.TERRACE_FLOOR, 530),
    _vfc(9, "Lift Machine Room VFC", CanonicalLevel.LIFT_MACHINE_ROOM, 545),
    _vfc(10, "OHT Level VFC", CanonicalLevel.OHT_LEVEL, 560),
)

# ---------------------------------------------------------------------------
# Phase order
# ---------------------------------------------------------------------------

PHASE_CATALOGS: tuple[PhaseCatalog, ...] = (
    PhaseCatalog(
        phase=DdsPhase.CONCEPT,
        label="Concept",
        building_scoped=False,
        templates=CONCEPT_TEMPLATES,
    ),
    PhaseCatalog(
        phase=DdsPhase.LIAISON,
        label="Liaison",
        building_scoped=False,
        templates=LIAISON_TEMPLATES,
    ),
    PhaseCatalog(
        phase=DdsPhase.SLDS,
        label="SLDs",
        building_scoped=False,
        templates=SLD_TEMPLATES,
    ),
    PhaseCatalog(
        phase=DdsPhase.SD,
        label="SD",
        building_scoped=False,
        templates=SD_TEMPLATES,
    ),
    PhaseCatalog(
        phase=DdsPhase.DD,
        label="DD",
        building_scoped=True,
        gated=True,
        templates=DD_TEMPLATES,
    ),
    PhaseCatalog(
        phase=DdsPhase.DETAILED_CALCULATIONS,
        label="Calcs",
        building_scoped=True,
        gated=True,
        templates=CALCULATION_TEMPLATES,
    ),
    PhaseCatalog(
        phase=DdsPhase.BUILDERS_WORK,
        label="Builder's Work",
        building_scoped=True,
        gated=True,
        templates=BUILDERS_WORK_TEMPLATES,
    ),
    PhaseCatalog(
        phase=DdsPhase.TENDER,
        label="Tender",
        building_scoped=False,
        gated=True,
        templates=TENDER_TEMPLATES,
    ),
    PhaseCatalog(
        phase=DdsPhase.VFC,
        label="VFCs",
        building_scoped=True,
        gated=True,
        templates=VFC_TEMPLATES,
    ),
)

DDS_PHASES: tuple[DdsPhase, ...] = tuple(c.phase for c in PHASE_CATALOGS)

# VFC issues need architecture and structure inputs ahead of the MEP start.
VFC_ARCHITECT_LEAD_DAYS = 14
VFC_STRUCTURE_LEAD_DAYS = 7

POLICY_NAME = "Policy 130 - 3 Yr 10 Month Completion"
POLICY_NUMBER = "130"
POLICY_REVISION = 12
POLICY_VERSION = f"{POLICY_NUMBER}.{POLICY_REVISION}"
TEMPLATE_SOURCE = "DDS 9-phase deliverables template (Policy 130)"
