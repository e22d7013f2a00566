from dental_admin.forms.patient_form import PatientForm
from dental_admin.forms.dentist_form import DentistForm
from dental_admin.forms.appointment_form import AppointmentForm
from dental_admin.forms.dental_record_form import DentalRecordForm
