"""
Schemas del cliente — exportar las entidades y sus borradores.
"""

from dental_admin.schemas.patient import Patient, PatientDraft
from dental_admin.schemas.dentist import Dentist, DentistDraft, WorkingHours
from dental_admin.schemas.appointment import (
    Appointment,
    AppointmentDraft,
    AppointmentStatus,
)
from dental_admin.schemas.dental_record import (
    DentalImage,
    DentalProcedure,
    DentalRecord,
    DentalRecordDraft,
    DentalVisit,
    Prescription,
)
from dental_admin.schemas.treatment import Treatment, TreatmentDraft
