"""Policy 130 Annexure A: milestone days from master-plan start."""

from __future__ import annotations

from ddspolicy.models.catalog import Milestone

ANNEXURE_A_MILESTONES: tuple[Milestone, ...] = (
    Milestone(key="mp_start", name="MP Start Date",
              days_new=0, days_existing=0, responsibility="SLO & Design"),
    Milestone(key="consultant_appointment", name="Appointment of 5 Key Consultants",
              days_new=15, days_existing=15, responsibility="Design & CPT"),
    Milestone(key="concept_closure", name="Concept Design Closure (Architectural)",
              days_new=90, days_existing=75, responsibility="Design"),
    Milestone(key="timeline_signoff", name="Detailed Timeline Sign-off (including DDS)",
              days_new=105, days_existing=90, responsibility="RCEO & RCOO"),
    Milestone(key="concept_all_packages", name="Concept Closure for All Packages/Trades",
              days_new=180, days_existing=150, responsibility="Design"),
    Milestone(key="dd_closure", name="DD Closure (All Packages) + Budget Handover",
              days_new=290, days_existing=260, responsibility="Design"),
    Milestone(key="excavation_package", name="Excavation + Shoring Package Issuance",
              days_new=335, days_existing=305, responsibility="Design"),
    Milestone(key="excavation_start", name="Initiate Excavation (Construction Day 0)",
              days_new=335, days_existing=305, responsibility="CM"),
    Milestone(key="formwork_drawings", name="Formwork Drawings to Central Team",
              days_new=335, days_existing=305, responsibility="Design"),
    Milestone(key="vfc_civil_ground", name="VFC for Civil Works up to Ground",
              days_new=350, days_existing=320, responsibility="Design"),
    Milestone(key="civil_contractor", name="Civil Contractor Appointment",
              days_new=350, days_existing=320, responsibility="CPT"),
    Milestone(key="shell_coordination", name="Shell Drawings Coordination Closure",
              days_new=365, days_existing=335, responsibility="Design"),
    Milestone(key="first_concrete", name="First Concrete Pour (Foundation)",
              days_new=380, days_existing=350, responsibility="CM"),
    Milestone(key="typical_floor_vfc", name="First/Typical Floor VFC Issuance",
              days_new=425, days_existing=395, responsibility="Design"),
    Milestone(key="substructure_complete", name="Substructure Complete (Plinth Ready)",
              days_new=455, days_existing=425, responsibility="CM"),
    Milestone(key="first_habitable_pour", name="First Concrete Pour of Habitable Floor",
              days_new=500, days_existing=470, responsibility="CM"),
)
