"""Supported FHIR versions and their version-specific constants."""

from __future__ import annotations

import enum

_STU3_IDENTIFIABLE = frozenset(
    {
        "Account",
        "ActivityDefinition",
        "AllergyIntolerance",
        "Appointment",
        "AppointmentResponse",
        "Basic",
        "BodySite",
        "CarePlan",
        "CareTeam",
        "Claim",
        "ClaimResponse",
        "ClinicalImpression",
        "Communication",
        "CommunicationRequest",
        "Condition",
        "Coverage",
        "DataElement",
        "Device",
        "DeviceRequest",
        "DeviceUseStatement",
        "DiagnosticReport",
        "DocumentManifest",
        "DocumentReference",
        "EligibilityRequest",
        "EligibilityResponse",
        "Encounter",
        "Endpoint",
        "EnrollmentRequest",
        "EnrollmentResponse",
        "EpisodeOfCare",
        "ExplanationOfBenefit",
        "FamilyMemberHistory",
        "Flag",
        "Goal",
        "Group",
        "HealthcareService",
        "ImagingStudy",
        "Immunization",
        "ImmunizationRecommendation",
        "Library",
        "List",
        "Location",
        "Measure",
        "Media",
        "MedicationAdministration",
        "MedicationDispense",
        "MedicationRequest",
        "MedicationStatement",
        "NutritionOrder",
        "Observation",
        "Organization",
        "Patient",
        "PaymentNotice",
        "PaymentReconciliation",
        "Person",
        "PlanDefinition",
        "Practitioner",
        "PractitionerRole",
        "Procedure",
        "ProcedureRequest",
        "ProcessRequest",
        "ProcessResponse",
        "Questionnaire",
        "ReferralRequest",
        "RelatedPerson",
        "RequestGroup",
        "ResearchStudy",
        "Schedule",
        "Sequence",
        "ServiceDefinition",
        "Slot",
        "Specimen",
        "StructureDefinition",
        "StructureMap",
        "Substance",
        "Task",
        "ValueSet",
        "VisionPrescription",
    }
)

_R4B_IDENTIFIABLE = frozenset(
    {
        "Account",
        "ActivityDefinition",
        "AdministrableProductDefinition",
        "AllergyIntolerance",
        "Appointment",
        "AppointmentResponse",
        "Basic",
        "BiologicallyDerivedProduct",
        "BodyStructure",
        "CarePlan",
        "CareTeam",
        "CatalogEntry",
        "ChargeItem",
        "ChargeItemDefinition",
        "Citation",
        "Claim",
        "ClaimResponse",
        "ClinicalImpression",
        "ClinicalUseDefinition",
        "CodeSystem",
        "Communication",
        "CommunicationRequest",
        "Condition",
        "Consent",
        "Contract",
        "Coverage",
        "CoverageEligibilityRequest",
        "CoverageEligibilityResponse",
        "DetectedIssue",
        "Device",
        "DeviceDefinition",
        "DeviceMetric",
        "DeviceRequest",
        "DeviceUseStatement",
        "DiagnosticReport",
        "DocumentManifest",
        "DocumentReference",
        "Encounter",
        "Endpoint",
        "EnrollmentRequest",
        "EnrollmentResponse",
        "EpisodeOfCare",
        "EventDefinition",
        "Evidence",
        "EvidenceReport",
        "EvidenceVariable",
        "ExampleScenario",
        "ExplanationOfBenefit",
        "FamilyMemberHistory",
        "Flag",
        "Goal",
        "Group",
        "GuidanceResponse",
        "HealthcareService",
        "ImagingStudy",
        "Immunization",
        "ImmunizationEvaluation",
        "ImmunizationRecommendation",
        "InsurancePlan",
        "Invoice",
        "Library",
        "List",
        "Location",
        "ManufacturedItemDefinition",
        "Measure",
        "MeasureReport",
        "Media",
        "Medication",
        "MedicationAdministration",
        "MedicationDispense",
        "MedicationRequest",
        "MedicationStatement",
        "MedicinalProductDefinition",
        "MessageDefinition",
        "MolecularSequence",
        "NutritionOrder",
        "Observation",
        "ObservationDefinition",
        "Organization",
        "OrganizationAffiliation",
        "PackagedProductDefinition",
        "Patient",
        "PaymentNotice",
        "PaymentReconciliation",
        "Person",
        "PlanDefinition",
        "Practitioner",
        "PractitionerRole",
        "Procedure",
        "Questionnaire",
        "RegulatedAuthorization",
        "RelatedPerson",
        "RequestGroup",
        "ResearchDefinition",
        "ResearchElementDefinition",
        "ResearchStudy",
        "ResearchSubject",
        "RiskAssessment",
        "Schedule",
        "ServiceRequest",
        "Slot",
        "Specimen",
        "StructureDefinition",
        "StructureMap",
        "SubscriptionTopic",
        "Substance",
        "SubstanceDefinition",
        "SupplyDelivery",
        "SupplyRequest",
        "Task",
        "ValueSet",
        "VisionPrescription",
    }
)

_R5_IDENTIFIABLE = frozenset(
    {
        "Account",
        "ActivityDefinition",
        "ActorDefinition",
        "AdministrableProductDefinition",
        "AdverseEvent",
        "AllergyIntolerance",
        "Appointment",
        "AppointmentResponse",
        "ArtifactAssessment",
        "Basic",
        "BiologicallyDerivedProduct",
        "BiologicallyDerivedProductDispense",
        "BodyStructure",
        "CapabilityStatement",
        "CarePlan",
        "CareTeam",
        "ChargeItem",
        "ChargeItemDefinition",
        "Citation",
        "Claim",
        "ClaimResponse",
        "ClinicalImpression",
        "ClinicalUseDefinition",
        "CodeSystem",
        "Communication",
        "CommunicationRequest",
        "Composition",
        "ConceptMap",
        "Condition",
        "ConditionDefinition",
        "Consent",
        "Contract",
        "Coverage",
        "CoverageEligibilityRequest",
        "CoverageEligibilityResponse",
        "DetectedIssue",
        "Device",
        "DeviceAssociation",
        "DeviceDefinition",
        "DeviceDispense",
        "DeviceMetric",
        "DeviceRequest",
        "DeviceUsage",
        "DiagnosticReport",
        "DocumentReference",
        "Encounter",
        "EncounterHistory",
        "Endpoint",
        "EnrollmentRequest",
        "EnrollmentResponse",
        "EpisodeOfCare",
        "EventDefinition",
        "Evidence",
        "EvidenceReport",
        "EvidenceVariable",
        "ExampleScenario",
        "ExplanationOfBenefit",
        "FamilyMemberHistory",
        "Flag",
        "FormularyItem",
        "GenomicStudy",
        "Goal",
        "GraphDefinition",
        "Group",
        "GuidanceResponse",
        "HealthcareService",
        "ImagingSelection",
        "ImagingStudy",
        "Immunization",
        "ImmunizationEvaluation",
        "ImmunizationRecommendation",
        "ImplementationGuide",
        "InsurancePlan",
        "InventoryItem",
        "InventoryReport",
        "Invoice",
        "Library",
        "List",
        "Location",
        "ManufacturedItemDefinition",
        "Measure",
        "MeasureReport",
        "Medication",
        "MedicationAdministration",
        "MedicationDispense",
        "MedicationKnowledge",
        "MedicationRequest",
        "MedicationStatement",
        "MedicinalProductDefinition",
        "MessageDefinition",
        "MolecularSequence",
        "NamingSystem",
        "NutritionIntake",
        "NutritionOrder",
        "Observation",
        "OperationDefinition",
        "Organization",
        "OrganizationAffiliation",
        "PackagedProductDefinition",
        "Patient",
        "PaymentNotice",
        "PaymentReconciliation",
        "Person",
        "PlanDefinition",
        "Practitioner",
        "PractitionerRole",
        "Procedure",
        "Questionnaire",
        "QuestionnaireResponse",
        "RegulatedAuthorization",
        "RelatedPerson",
        "RequestOrchestration",
        "Requirements",
        "ResearchStudy",
        "ResearchSubject",
        "RiskAssessment",
        "Schedule",
        "SearchParameter",
        "ServiceRequest",
        "Slot",
        "Specimen",
        "StructureDefinition",
        "StructureMap",
        "Subscription",
        "SubscriptionTopic",
        "Substance",
        "SubstanceDefinition",
        "SupplyDelivery",
        "SupplyRequest",
        "Task",
        "TerminologyCapabilities",
        "TestPlan",
        "TestScript",
        "Transport",
        "ValueSet",
        "VisionPrescription",
    }
)


def resource_type_name(resource_type) -> str:
    """Return the plain name of a resource type given as text or as a string enum."""
    if isinstance(resource_type, enum.Enum):
        return str(resource_type.value)
    if isinstance(resource_type, str):
        return resource_type
    raise TypeError(f"not a resource type: {resource_type!r}")


class FhirVersion(enum.Enum):
    """A FHIR release this package knows about."""

    STU3 = "stu3"
    R4B = "r4b"
    R5 = "r5"

    @property
    def version(self) -> str:
        """Numeric version string, as used in the MIME type."""
        return _VERSION_NUMBERS[self]

    @property
    def json_mime_type(self) -> str:
        """MIME type this version uses for JSON."""
        return f"application/fhir+json; fhirVersion={self.version}"

    @property
    def identifiable_resources(self) -> frozenset[str]:
        """Names of the resource types that carry an ``identifier`` list."""
        return _IDENTIFIABLE[self]

    @property
    def has_reference_type(self) -> bool:
        """Whether ``Reference`` has a ``type`` field in this version."""
        return self is not FhirVersion.STU3

    def is_identifiable(self, resource_type) -> bool:
        """Whether resources of this type have an ``identifier`` list."""
        return resource_type_name(resource_type) in _IDENTIFIABLE[self]


_VERSION_NUMBERS = {
    FhirVersion.STU3: "3.0",
    FhirVersion.R4B: "4.3",
    FhirVersion.R5: "5.0",
}

_IDENTIFIABLE = {
    FhirVersion.STU3: _STU3_IDENTIFIABLE,
    FhirVersion.R4B: _R4B_IDENTIFIABLE,
    FhirVersion.R5: _R5_IDENTIFIABLE,
}