"""Sample services written by `govcat.bootstrap.initialize` on an empty catalogue."""

from typing import Any

DEFAULT_SERVICES: tuple[dict[str, Any], ...] = (
    {
        "name": "Passport Application Service",
        "description": (
            "Online application system for new passports, renewals, and "
            "replacements. Citizens can submit applications, upload documents, "
            "track status, and schedule appointments at passport offices."
        ),
        "owner": "Department of Foreign Affairs",
        "tags": ["passport", "travel", "identity", "documents", "online-application"],
        "docs_link": "https://example.gov/passport-service-docs",
    },
    {
        "name": "Business Registration Portal",
        "description": (
            "Comprehensive platform for registering new businesses, managing "
            "business licenses, and maintaining corporate records. Includes "
            "features for name reservation, tax registration, and compliance "
            "reporting."
        ),
        "owner": "Ministry of Commerce",
        "tags": ["business", "registration", "licensing", "corporate", "compliance"],
        "docs_link": "https://example.gov/business-registration-docs",
    },
    {
        "name": "Healthcare Provider Network",
        "description": (
            "Directory and management system for healthcare providers, "
            "facilities, and services. Enables citizens to find doctors, book "
            "appointments, and access medical records securely."
        ),
        "owner": "Department of Health",
        "tags": ["healthcare", "medical", "appointments", "providers", "directory"],
        "docs_link": "https://example.gov/healthcare-network-docs",
    },
    {
        "name": "Tax Filing System",
        "description": (
            "Electronic tax filing platform for individuals and businesses. "
            "Supports multiple tax forms, automatic calculations, refund "
            "tracking, and secure document storage."
        ),
        "owner": "Revenue Authority",
        "tags": ["tax", "filing", "revenue", "refunds", "electronic"],
        "docs_link": "https://example.gov/tax-filing-docs",
    },
    {
        "name": "Social Benefits Portal",
        "description": (
            "Unified platform for applying and managing social benefits "
            "including unemployment insurance, disability support, and family "
            "assistance programs."
        ),
        "owner": "Ministry of Social Affairs",
        "tags": [
            "benefits",
            "social-services",
            "unemployment",
            "disability",
            "assistance",
        ],
        "docs_link": "https://example.gov/social-benefits-docs",
    },
    {
        "name": "Property Assessment Service",
        "description": (
            "System for property valuation, tax assessment, and ownership "
            "records. Provides online access to property information and "
            "appeals process for assessments."
        ),
        "owner": "Municipal Services",
        "tags": ["property", "assessment", "valuation", "municipal", "records"],
        "docs_link": "https://example.gov/property-assessment-docs",
    },
)
