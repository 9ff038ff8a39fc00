from __future__ import annotations

TRADUCCIONES_TOASTS = {
    "es": {
        "pacientes.error.cargar": "Error al cargar los pacientes",
        "pacientes.error.buscar": "Error en la búsqueda",
        "pacientes.error.obtener": "Error al recuperar el paciente",
        "pacientes.exito.crear": "Paciente creado correctamente",
        "pacientes.error.crear": "Error al crear el paciente",
        "pacientes.exito.actualizar": "Paciente actualizado correctamente",
        "pacientes.error.actualizar": "Error al actualizar el paciente",
        "pacientes.exito.eliminar": "Paciente eliminado correctamente",
        "pacientes.error.eliminar": "Error al eliminar el paciente",
        "consultas.error.cargar": "Error al cargar las consultas",
        "consultas.exito.crear": "Consulta creada correctamente",
        "consultas.error.crear": "Error al crear la consulta",
        "consultas.error.hoy": "Error al cargar las consultas de hoy",
        "consultas.error.proximas": "Error al cargar las próximas consultas",
        "consultas.error.estadisticas": "Error al cargar las estadísticas",
        "citas.error.cargar": "Error al cargar las citas",
        "citas.exito.crear": "Cita creada correctamente",
        "citas.error.crear": "Error al crear la cita",
        "citas.error.hoy": "Error al cargar las citas de hoy",
        "citas.error.proximas": "Error al cargar las próximas citas",
        "citas.exito.completar": "Cita marcada como completada",
        "citas.exito.cancelar": "Cita cancelada",
        "citas.exito.ausente": "Cita marcada como ausente",
        "citas.error.actualizar": "Error al actualizar la cita",
        "citas.error.cancelar": "Error al cancelar la cita",
        "diagnosticos.error.cargar": "Error al cargar los diagnósticos",
        "diagnosticos.exito.crear": "Diagnóstico creado correctamente",
        "diagnosticos.error.crear": "Error al crear el diagnóstico",
        "diagnosticos.error.con_cie": "Error al cargar los diagnósticos con código CIE",
        "medicos.error.cargar": "Error al cargar los médicos",
        "medicos.exito.crear": "Médico creado correctamente",
        "medicos.error.crear": "Error al crear el médico",
        "medicos.error.por_especialidad": "Error al cargar los médicos por especialidad",
        "medicos.error.estadisticas": "Error al cargar las estadísticas",
        "pagos.error.cargar": "Error al cargar los pagos",
        "pagos.exito.crear": "Pago creado correctamente",
        "pagos.error.crear": "Error al crear el pago",
        "pagos.error.estadisticas": "Error al cargar las estadísticas de pagos",
        "pagos.error.ingresos_diarios": "Error al cargar los ingresos diarios",
        "pagos.error.por_metodo": "Error al cargar los pagos por método",
        "pagos.exito.marcar_pagado": "Pago marcado como pagado",
        "pagos.exito.reembolsar": "Pago reembolsado",
        "pagos.error.reembolsar": "Error al reembolsar",
        "pagos.exito.marcar_fallido": "Pago marcado como fallido",
        "pagos.error.actualizar": "Error al actualizar el pago",
        "recetas.error.cargar": "Error al cargar las recetas",
        "recetas.exito.crear": "Receta creada correctamente",
        "recetas.error.crear": "Error al crear la receta",
        "recetas.exito.agregar_item": "Medicamento añadido a la receta",
        "recetas.error.agregar_item": "Error al añadir el medicamento",
        "recetas.error.populares": "Error al cargar los medicamentos más recetados",
        "historias.error.cargar": "Error al cargar las historias clínicas",
        "historias.error.obtener": "Error al cargar la historia clínica",
        "historias.error.de_paciente": "Error al cargar la historia clínica del paciente",
        "auth.exito.registro": "Usuario registrado correctamente",
        "auth.error.registro": "Error en el registro",
        "auth.exito.login": "Sesión iniciada",
        "auth.error.login": "Error al iniciar sesión",
        "auth.exito.logout": "Sesión cerrada",
        "auth.error.logout": "Error al cerrar sesión",
    },
    "en": {
        "pacientes.error.cargar": "Error loading patients",
        "pacientes.error.buscar": "Search failed",
        "pacientes.error.obtener": "Error retrieving the patient",
        "pacientes.exito.crear": "Patient created successfully",
        "pacientes.error.crear": "Error creating the patient",
        "pacientes.exito.actualizar": "Patient updated successfully",
        "pacientes.error.actualizar": "Error updating the patient",
        "pacientes.exito.eliminar": "Patient deleted successfully",
        "pacientes.error.eliminar": "Error deleting the patient",
        "consultas.error.cargar": "Error loading consultations",
        "consultas.exito.crear": "Consultation created successfully",
        "consultas.error.crear": "Error creating the consultation",
        "consultas.error.hoy": "Error loading today's consultations",
        "consultas.error.proximas": "Error loading upcoming consultations",
        "consultas.error.estadisticas": "Error loading statistics",
        "citas.error.cargar": "Error loading appointments",
        "citas.exito.crear": "Appointment created successfully",
        "citas.error.crear": "Error creating the appointment",
        "citas.error.hoy": "Error loading today's appointments",
        "citas.error.proximas": "Error loading upcoming appointments",
        "citas.exito.completar": "Appointment marked as completed",
        "citas.exito.cancelar": "Appointment cancelled",
        "citas.exito.ausente": "Appointment marked as no-show",
        "citas.error.actualizar": "Error updating the appointment",
        "citas.error.cancelar": "Error cancelling the appointment",
        "diagnosticos.error.cargar": "Error loading diagnostics",
        "diagnosticos.exito.crear": "Diagnostic created successfully",
        "diagnosticos.error.crear": "Error creating the diagnostic",
        "diagnosticos.error.con_cie": "Error loading diagnostics with ICD codes",
        "medicos.error.cargar": "Error loading doctors",
        "medicos.exito.crear": "Doctor created successfully",
        "medicos.error.crear": "Error creating the doctor",
        "medicos.error.por_especialidad": "Error loading doctors by specialty",
        "medicos.error.estadisticas": "Error loading statistics",
        "pagos.error.cargar": "Error loading payments",
        "pagos.exito.crear": "Payment created successfully",
        "pagos.error.crear": "Error creating the payment",
        "pagos.error.estadisticas": "Error loading payment statistics",
        "pagos.error.ingresos_diarios": "Error loading daily revenue",
        "pagos.error.por_metodo": "Error loading payments by method",
        "pagos.exito.marcar_pagado": "Payment marked as paid",
        "pagos.exito.reembolsar": "Payment refunded",
        "pagos.error.reembolsar": "Refund failed",
        "pagos.exito.marcar_fallido": "Payment marked as failed",
        "pagos.error.actualizar": "Error updating the payment",
        "recetas.error.cargar": "Error loading prescriptions",
        "recetas.exito.crear": "Prescription created successfully",
        "recetas.error.crear": "Error creating the prescription",
        "recetas.exito.agregar_item": "Medication added to the prescription",
        "recetas.error.agregar_item": "Error adding the medication",
        "recetas.error.populares": "Error loading popular medications",
        "historias.error.cargar": "Error loading medical records",
        "historias.error.obtener": "Error loading the medical record",
        "historias.error.de_paciente": "Error loading the patient's medical record",
        "auth.exito.registro": "User registered successfully",
        "auth.error.registro": "Registration failed",
        "auth.exito.login": "Signed in",
        "auth.error.login": "Sign-in failed",
        "auth.exito.logout": "Signed out",
        "auth.error.logout": "Sign-out failed",
    },
    "fr": {
        "pacientes.error.cargar": "Erreur lors du chargement des patients",
        "pacientes.error.buscar": "Erreur lors de la recherche",
        "pacientes.error.obtener": "Erreur lors de la récupération du patient",
        "pacientes.exito.crear": "Patient créé avec succès",
        "pacientes.error.crear": "Erreur lors de la création du patient",
        "pacientes.exito.actualizar": "Patient mis à jour avec succès",
        "pacientes.error.actualizar": "Erreur lors de la mise à jour du patient",
        "pacientes.exito.eliminar": "Patient supprimé avec succès",
        "pacientes.error.eliminar": "Erreur lors de la suppression du patient",
        "consultas.error.cargar": "Erreur lors du chargement des consultations",
        "consultas.exito.crear": "Consultation créée avec succès",
        "consultas.error.crear": "Erreur lors de la création de la consultation",
        "consultas.error.hoy": "Erreur lors du chargement des consultations d'aujourd'hui",
        "consultas.error.proximas": "Erreur lors du chargement des consultations à venir",
        "consultas.error.estadisticas": "Erreur lors du chargement des statistiques",
        "citas.error.cargar": "Erreur lors du chargement des rendez-vous",
        "citas.exito.crear": "Rendez-vous créé avec succès",
        "citas.error.crear": "Erreur lors de la création du rendez-vous",
        "citas.error.hoy": "Erreur lors du chargement des rendez-vous d'aujourd'hui",
        "citas.error.proximas": "Erreur lors du chargement des rendez-vous à venir",
        "citas.exito.completar": "Rendez-vous marqué comme terminé",
        "citas.exito.cancelar": "Rendez-vous annulé",
        "citas.exito.ausente": "Rendez-vous marqué comme absent",
        "citas.error.actualizar": "Erreur lors de la mise à jour du rendez-vous",
        "citas.error.cancelar": "Erreur lors de l'annulation du rendez-vous",
        "diagnosticos.error.cargar": "Erreur lors du chargement des diagnostics",
        "diagnosticos.exito.crear": "Diagnostic créé avec succès",
        "diagnosticos.error.crear": "Erreur lors de la création du diagnostic",
        "diagnosticos.error.con_cie": "Erreur lors du chargement des diagnostics avec codes ICD",
        "medicos.error.cargar": "Erreur lors du chargement des médecins",
        "medicos.exito.crear": "Médecin créé avec succès",
        "medicos.error.crear": "Erreur lors de la création du médecin",
        "medicos.error.por_especialidad": "Erreur lors du chargement des médecins par spécialité",
        "medicos.error.estadisticas": "Erreur lors du chargement des statistiques",
        "pagos.error.cargar": "Erreur lors du chargement des paiements",
        "pagos.exito.crear": "Paiement créé avec succès",
        "pagos.error.crear": "Erreur lors de la création du paiement",
        "pagos.error.estadisticas": "Erreur lors du chargement des statistiques de paiement",
        "pagos.error.ingresos_diarios": "Erreur lors du chargement des revenus quotidiens",
        "pagos.error.por_metodo": "Erreur lors du chargement des paiements par méthode",
        "pagos.exito.marcar_pagado": "Paiement marqué comme payé",
        "pagos.exito.reembolsar": "Paiement remboursé",
        "pagos.error.reembolsar": "Erreur lors du remboursement",
        "pagos.exito.marcar_fallido": "Paiement marqué comme échoué",
        "pagos.error.actualizar": "Erreur lors de la mise à jour du paiement",
        "recetas.error.cargar": "Erreur lors du chargement des prescriptions",
        "recetas.exito.crear": "Prescription créée avec succès",
        "recetas.error.crear": "Erreur lors de la création de la prescription",
        "recetas.exito.agregar_item": "Médicament ajouté à la prescription",
        "recetas.error.agregar_item": "Erreur lors de l'ajout du médicament",
        "recetas.error.populares": "Erreur lors du chargement des médicaments populaires",
        "historias.error.cargar": "Erreur lors du chargement des dossiers médicaux",
        "historias.error.obtener": "Erreur lors du chargement du dossier médical",
        "historias.error.de_paciente": "Erreur lors du chargement du dossier médical du patient",
        "auth.exito.registro": "Utilisateur enregistré avec succès",
        "auth.error.registro": "Erreur lors de l'inscription",
        "auth.exito.login": "Connexion réussie",
        "auth.error.login": "Erreur lors de la connexion",
        "auth.exito.logout": "Déconnexion réussie",
        "auth.error.logout": "Erreur lors de la déconnexion",
    },
}
