"""Fixed rows of the VFC and DD drawing registers.

Calculations and schematics are issued once per tower regardless of the
floor list. Layout categories are expanded against the tower's derived
levels and filtered through the trade/level matrix.
"""

from __future__ import annotations

from ddspolicy.models.catalog import DrawingTemplate, LayoutCategory
from ddspolicy.models.enums import FeatureKey

# MEP trades drawn floor by floor in the VFC register
VFC_TRADES: tuple[str, ...] = (
    "Fire Fighting",
    "PHE",
    "HVAC",
    "Lighting",
    "Small Power",
    "Lightning Protection",
    "Containment",
    "FA & PA",
    "ELV",
)

DD_CALCULATIONS: tuple[DrawingTemplate, ...] = (
    DrawingTemplate(trade="Fire Fighting", doc_type="Calculation",
                    description="UGT & OHT Tank Capacity"),
    DrawingTemplate(trade="Fire Fighting", doc_type="Calculation",
                    description="Pump Sizing (Flow Rate & Header)"),
    DrawingTemplate(trade="Fire Fighting", doc_type="Calculation",
                    description="Pump Header Sizing"),
    DrawingTemplate(trade="PHE", doc_type="Calculation",
                    description="UGT & OHT Tank Capacity"),
    DrawingTemplate(trade="PHE", doc_type="Calculation",
                    description="Suction Header Sizing"),
    DrawingTemplate(trade="PHE", doc_type="Calculation",
                    description="Pump Capacity (Transfer, Booster, Sump)"),
    DrawingTemplate(trade="PHE", doc_type="Calculation",
                    description="Transfer Pipe Sizing"),
    DrawingTemplate(trade="PHE", doc_type="Calculation",
                    description="Terrace Rain Water Pipe Sizing"),
    DrawingTemplate(trade="PHE", doc_type="Calculation",
                    description="Rain Water Calculation (Pipe Count & Diameter)"),
    DrawingTemplate(trade="HVAC", doc_type="Calculation",
                    description="Heat Load Calculation (HAP & Summary)"),
    DrawingTemplate(trade="HVAC", doc_type="Calculation",
                    description="Basement & Pump Room Ventilation (Normal & Smoke Exhaust)",
                    conditional=FeatureKey.HAS_BASEMENT),
    DrawingTemplate(trade="HVAC", doc_type="Calculation",
                    description="Lift Well Pressurization"),
    DrawingTemplate(trade="HVAC", doc_type="Calculation",
                    description="Car Parking Ventilation Calculation",
                    conditional=FeatureKey.HAS_PARKING),
    DrawingTemplate(trade="Electrical", doc_type="Calculation",
                    description="Load Calculation (Normal & Emergency Power)"),
    DrawingTemplate(trade="Electrical", doc_type="Calculation",
                    description="Cable Schedule & Voltage Drop"),
    DrawingTemplate(trade="Electrical", doc_type="Calculation",
                    description="Earthing Strip Sizing"),
    DrawingTemplate(trade="Electrical", doc_type="Calculation",
                    description="Lightning Protection Calculation"),
    DrawingTemplate(trade="Electrical", doc_type="Calculation",
                    description="Short Circuit Calculation"),
    DrawingTemplate(trade="Electrical", doc_type="Calculation",
                    description="Risk Analysis Calculation"),
)

DD_SCHEMATICS: tuple[DrawingTemplate, ...] = (
    DrawingTemplate(trade="PHE", doc_type="Schematic",
                    description="Water Supply Schematic"),
    DrawingTemplate(trade="PHE", doc_type="Schematic",
                    description="Drainage Schematic"),
    DrawingTemplate(trade="PHE", doc_type="Schematic",
                    description="Rain Water Schematic"),
    DrawingTemplate(trade="Fire Fighting", doc_type="Schematic",
                    description="Fire Fighting Schematic"),
    DrawingTemplate(trade="HVAC", doc_type="Schematic",
                    description="Condensate Drain Schematic"),
    DrawingTemplate(trade="HVAC", doc_type="Schematic",
                    description="HVAC Schematic (Staircase, Lift Lobby & Pressurization)"),
    DrawingTemplate(trade="Electrical", doc_type="Schematic",
                    description="Electrical SLD"),
    DrawingTemplate(trade="Electrical", doc_type="Schematic",
                    description="Earthing Schematic"),
    DrawingTemplate(trade="Electrical", doc_type="Schematic",
                    description="Lightning Protection Schematic"),
    DrawingTemplate(trade="ELV", doc_type="Schematic",
                    description="ELV Schematic"),
    DrawingTemplate(trade="FAVA", doc_type="Schematic",
                    description="FAVA Schematic"),
)

DD_LAYOUT_CATEGORIES: tuple[LayoutCategory, ...] = (
    LayoutCategory(category="CO Layouts", trade="Co-ordinate"),
    LayoutCategory(category="BW Layouts", trade="Builders Work"),
    LayoutCategory(category="HVAC Layouts", trade="HVAC"),
    LayoutCategory(category="FF Layouts", trade="Fire Fighting"),
    LayoutCategory(category="PHE Layouts", trade="PHE"),
    LayoutCategory(category="Containment Layouts", trade="Containment"),
    LayoutCategory(category="Lighting Layouts", trade="Lighting"),
    LayoutCategory(category="Small Power Layouts", trade="Small Power"),
    LayoutCategory(category="FAVA Layouts", trade="FAVA"),
    LayoutCategory(category="ELV Layouts", trade="ELV"),
    LayoutCategory(category="LPS Layouts", trade="Lightning Protection"),
)

VFC_CATEGORY = "VFC Layouts"
DD_CALCULATION_CATEGORY = "A. Calculations"
DD_SCHEMATIC_CATEGORY = "B. Schematics"

# Register weeks from project start, before the tower stagger
DD_CALCULATION_BASE_WEEK = 22
DD_CALCULATION_LEAD_WEEKS = 6
DD_SCHEMATIC_BASE_WEEK = 28
DD_SCHEMATIC_LEAD_WEEKS = 4
DD_LAYOUT_BASE_WEEK = 30
DD_LAYOUT_LEAD_WEEKS = 3
VFC_LEAD_WEEKS = 2

# Trades issued for every external site area
EXTERNAL_AREA_TRADES: tuple[str, ...] = (
    "Electrical",
    "PHE",
    "Fire Fighting",
    "HVAC",
    "Security",
)
EXTERNAL_AREA_SECTION = "External Areas"
