from datetime import date

from django.db import transaction

from enzian_backend.core.utils import log_record_action
from enzian_backend.diagnoses.classification import final_classification
from enzian_backend.diagnoses.models import Diagnosis
from enzian_backend.doctors.models import Doctor
from enzian_backend.patients.models import Patient


DOCTORS = [
    {
        "name": "Dr. João Silva",
        "email": "joao.silva@exemplo.com",
        "crm": "123456",
        "specialty": "Ginecologia e Obstetrícia",
        "phone": "(11) 98765-4321",
    },
    {
        "name": "Dra. Maria Santos",
        "email": "maria.santos@exemplo.com",
        "crm": "789012",
        "specialty": "Reprodução Humana",
        "phone": "(11) 91234-5678",
    },
    {
        "name": "Dr. Pedro Oliveira",
        "email": "pedro.oliveira@exemplo.com",
        "crm": "345678",
        "specialty": "Endocrinologia Ginecológica",
        "phone": "(11) 92345-6789",
    },
]

# (patient fields, index into DOCTORS)
PATIENTS = [
    ({
        "name": "Maria Santos",
        "email": "maria.santos@email.com",
        "phone": "(11) 91234-5678",
        "date_of_birth": date(1990, 5, 15),
        "medical_record": "MS001",
    }, 0),
    ({
        "name": "Ana Oliveira",
        "email": "ana.oliveira@email.com",
        "phone": "(11) 92345-6789",
        "date_of_birth": date(1985, 8, 22),
        "medical_record": "AO002",
    }, 1),
    ({
        "name": "Carla Pereira",
        "email": "carla.pereira@email.com",
        "phone": "(11) 93456-7890",
        "date_of_birth": date(1992, 12, 10),
        "medical_record": "CP003",
    }, 0),
]

# (diagnosis fields, patient index, doctor index)
DIAGNOSES = [
    ({
        "peritoneum": "P2", "peritoneum_size": "3-7cm",
        "ovary": "O1", "ovary_size": "<3cm",
        "tube": "T1", "tube_size": "<3cm",
        "deep_endometriosis": "B", "deep_endometriosis_size": "3-7cm",
        "observations": "Paciente apresenta dor pélvica crônica. Lesões observadas durante laparoscopia.",
    }, 0, 0),
    ({
        "peritoneum": "P1", "peritoneum_size": "<3cm",
        "ovary": "O2", "ovary_size": "3-7cm",
        "tube": "T2", "tube_size": "3-7cm",
        "deep_endometriosis": "A", "deep_endometriosis_size": "<3cm",
        "observations": "Endometriose moderada com envolvimento ovariano bilateral.",
    }, 1, 1),
    ({
        "peritoneum": "P3", "peritoneum_size": ">7cm",
        "ovary": "O3", "ovary_size": ">7cm",
        "tube": "T3", "tube_size": ">7cm",
        "deep_endometriosis": "C", "deep_endometriosis_size": ">7cm",
        "observations": "Endometriose grave com acometimento extenso e infiltração de órgãos adjacentes.",
    }, 2, 0),
]


def seed_demo_data() -> dict:
    """
    Replace every doctor, patient and diagnosis with the demo dataset.

    Destructive: all existing records are deleted first. Runs in one
    transaction, so a failure leaves the previous data in place.

    Returns the created records under "doctors", "patients" and "diagnoses".
    """
    with transaction.atomic():
        Diagnosis.objects.all().delete()
        Patient.objects.all().delete()
        Doctor.objects.all().delete()

        doctors = [Doctor.objects.create(**fields) for fields in DOCTORS]
        patients = [
            Patient.objects.create(doctor=doctors[doctor_index], **fields)
            for fields, doctor_index in PATIENTS
        ]
        diagnoses = [
            _create_diagnosis(patients[patient_index], doctors[doctor_index], fields)
            for fields, patient_index, doctor_index in DIAGNOSES
        ]

    log_record_action(
        "demo_data_seeded",
        meta={
            "doctors": len(doctors),
            "patients": len(patients),
            "diagnoses": len(diagnoses),
        },
    )
    return {"doctors": doctors, "patients": patients, "diagnoses": diagnoses}


def _create_diagnosis(patient, doctor, fields) -> Diagnosis:
    code = final_classification(
        fields["peritoneum"], fields["ovary"], fields["tube"], fields["deep_endometriosis"]
    )
    return Diagnosis.objects.create(
        patient=patient,
        doctor=doctor,
        final_classification=code,
        **fields,
    )
