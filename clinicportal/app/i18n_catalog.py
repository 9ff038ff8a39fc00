from __future__ import annotations

_TRANSLATIONS = {
    "es": {
        "app.title": "ClinicPortal",
        "menu.archivo": "Archivo",
        "menu.logout": "Cerrar sesión",
        "menu.salir": "Salir",
        "nav.dashboard": "Inicio",
        "nav.consultas": "Consultas",
        "nav.pacientes": "Pacientes",
        "nav.citas": "Citas",
        "nav.recetas": "Recetas",
        "lang.es": "Español",
        "lang.en": "English",
        "lang.fr": "Français",
        "login.title": "Acceso",
        "login.info_registro": "Crea una cuenta para acceder a la clínica.",
        "login.user": "Usuario",
        "login.password": "Contraseña",
        "login.email": "Email",
        "login.nombre": "Nombre",
        "login.apellidos": "Apellidos",
        "login.submit": "Entrar",
        "login.create": "Crear cuenta",
        "login.to_login": "Ya tengo cuenta",
        "login.to_register": "Registrarme",
        "login.error.required": "Usuario y contraseña son obligatorios.",
        "comun.todos": "Todos",
        "comun.refrescar": "Refrescar",
        "comun.limpiar": "Limpiar",
        "comun.guardar": "Guardar",
        "comun.cancelar": "Cancelar",
        "comun.editar": "Editar",
        "comun.eliminar": "Eliminar",
        "comun.reiniciar": "Reiniciar",
        "comun.cargando": "Cargando…",
        "comun.contador": "Mostrando {n} de {total}",
        "col.paciente": "Paciente",
        "col.medico": "Médico",
        "col.hora": "Hora",
        "col.fecha": "Fecha",
        "col.estado": "Estado",
        "col.diagnostico": "Diagnóstico",
        "col.motivo": "Motivo",
        "col.notas": "Notas",
        "col.pago": "Pago",
        "col.importe": "Importe",
        "col.metodo": "Método",
        "col.referencia": "Referencia",
        "col.consulta": "Consulta",
        "col.receta": "Receta",
        "col.medicamentos": "Medicamentos",
        "col.edad": "Edad",
        "col.genero": "Género",
        "col.telefono": "Teléfono",
        "col.email": "Email",
        "col.num_seguro": "Nº seguro",
        "genero.m": "Masculino",
        "genero.f": "Femenino",
        "cita.estado.scheduled": "Programada",
        "cita.estado.completed": "Completada",
        "cita.estado.cancelled": "Cancelada",
        "cita.estado.no_show": "No presentado",
        "pago.estado.pending": "Pendiente",
        "pago.estado.completed": "Completado",
        "pago.estado.failed": "Fallido",
        "pago.estado.refunded": "Reembolsado",
        "pago.metodo.cash": "Efectivo",
        "pago.metodo.card": "Tarjeta",
        "pago.metodo.insurance": "Seguro",
        "pago.cita.pagado": "Pagado",
        "pago.cita.sin_pagar": "Sin pagar",
        "dashboard.titulo": "Panel de la clínica",
        "dashboard.kpi.pacientes": "Pacientes",
        "dashboard.kpi.consultas_hoy": "Consultas de hoy",
        "dashboard.kpi.consultas_total": "{n} en total",
        "dashboard.kpi.citas": "Próximas citas",
        "dashboard.kpi.ingresos": "Ingresos",
        "dashboard.consultas_hoy": "Consultas de hoy",
        "dashboard.proximas_citas": "Próximas citas",
        "dashboard.estado.terminada": "Terminada",
        "dashboard.estado.en_curso": "En curso",
        "dashboard.estado.en_espera": "En espera",
        "dashboard.paciente_desconocido": "Paciente desconocido",
        "dashboard.diagnostico_en_curso": "Diagnóstico en curso",
        "dashboard.consulta_general": "Consulta general",
        "pacientes.buscar": "Buscar por nombre, teléfono, email o nº de seguro…",
        "pacientes.nuevo": "Nuevo paciente",
        "pacientes.total": "Total de pacientes: {n}",
        "pacientes.form.nuevo": "Nuevo paciente",
        "pacientes.form.editar": "Editar paciente",
        "pacientes.form.nombre": "Nombre",
        "pacientes.form.apellidos": "Apellidos",
        "pacientes.form.genero": "Género",
        "pacientes.form.fecha_nacimiento": "Fecha de nacimiento",
        "pacientes.form.telefono": "Teléfono",
        "pacientes.form.email": "Email",
        "pacientes.form.direccion": "Dirección",
        "pacientes.form.nacionalidad": "Nacionalidad",
        "pacientes.form.altura": "Altura",
        "pacientes.form.peso": "Peso",
        "pacientes.eliminar.titulo": "Eliminar paciente",
        "pacientes.eliminar.confirmar": "¿Eliminar a {nombre}? Esta acción no se puede deshacer.",
        "pacientes.historia.ver": "Historia clínica",
        "pacientes.historia.titulo": "Historia clínica",
        "pacientes.historia.medico": "Médico responsable",
        "pacientes.historia.antecedentes": "Antecedentes",
        "pacientes.historia.cronicas": "Enfermedades crónicas",
        "pacientes.historia.familiares": "Antecedentes familiares",
        "pacientes.historia.num_consultas": "Consultas registradas: {n}",
        "pacientes.historia.sin_historia": "El paciente aún no tiene historia clínica.",
        "pacientes.pagos.titulo": "Pagos",
        "pacientes.pagos.resumen": "Pagado: {pagado} · Pendiente: {pendiente} · Último pago: {ultimo}",
        "citas.buscar": "Buscar paciente…",
        "citas.nueva": "Nueva cita",
        "citas.completar": "Completar",
        "citas.cancelar": "Cancelar cita",
        "citas.cancelar.confirmar": "¿Cancelar la cita seleccionada?",
        "citas.ausente": "No presentado",
        "citas.contadores": "Total {total} · Completadas {completadas} · Programadas {programadas} · "
        "Canceladas {canceladas} · Pagadas {pagadas} · Sin pagar {sin_pagar}",
        "citas.form.titulo": "Nueva cita",
        "citas.form.buscar_paciente": "Escribe al menos 2 letras del paciente…",
        "citas.form.seleccione_medico": "Selecciona un médico",
        "consultas.buscar": "Buscar por paciente, médico, motivo o diagnóstico…",
        "consultas.nueva": "Nueva consulta",
        "consultas.registrar_pago": "Registrar pago",
        "consultas.kpi.ingresos_hoy": "Ingresos de hoy",
        "consultas.kpi.pagos_hoy": "Pagos de hoy",
        "consultas.kpi.sin_pagar": "Consultas sin pagar",
        "consultas.kpi.ingresos_totales": "Ingresos totales",
        "consultas.form.titulo": "Nueva consulta",
        "consultas.form.sintomas": "Síntomas",
        "consultas.form.observacion": "Observación",
        "consultas.form.pasos": "Pasos recomendados",
        "consultas.form.elegir_diagnostico": "Elegir…",
        "consultas.form.confirmar_reinicio": "¿Vaciar todos los campos del formulario?",
        "diagnosticos.dialogo.titulo": "Diagnóstico",
        "diagnosticos.dialogo.buscar": "Buscar diagnóstico…",
        "diagnosticos.dialogo.nuevo": "Nuevo diagnóstico",
        "diagnosticos.dialogo.nombre": "Nombre",
        "diagnosticos.dialogo.descripcion": "Descripción",
        "diagnosticos.dialogo.cie": "Código CIE",
        "diagnosticos.dialogo.crear": "Crear y elegir",
        "diagnosticos.dialogo.elegir": "Elegir",
        "pagos.dialogo.titulo": "Pago de consulta",
        "pagos.dialogo.registrar": "Registrar",
        "pagos.marcar_pagado": "Marcar pagado",
        "pagos.reembolsar": "Reembolsar",
        "pagos.reembolsar.confirmar": "¿Reembolsar el pago de esta consulta?",
        "pagos.marcar_fallido": "Marcar fallido",
        "pagos.marcar_fallido.confirmar": "¿Marcar el pago como fallido?",
        "recetas.buscar": "Buscar por id de receta…",
        "recetas.rango": "Entre fechas",
        "recetas.nueva": "Nueva receta",
        "recetas.agregar_item": "Añadir medicamento",
        "recetas.populares": "Medicamentos más recetados",
        "recetas.populares.vacio": "Sin datos.",
        "recetas.detalle": "Detalle",
        "recetas.sin_seleccion": "Selecciona una receta.",
        "recetas.detalle.consulta": "{paciente} · {medico} {especialidad}\n{fecha}\n{notas}",
        "recetas.item.titulo": "Medicamento",
        "recetas.item.medicamento": "Medicamento",
        "recetas.item.dosis": "Dosis",
        "recetas.item.frecuencia": "Frecuencia",
        "recetas.item.duracion": "Duración",
        "recetas.item.indicacion": "Indicación",
    },
    "en": {
        "app.title": "ClinicPortal",
        "menu.archivo": "File",
        "menu.logout": "Log out",
        "menu.salir": "Exit",
        "nav.dashboard": "Dashboard",
        "nav.consultas": "Consultations",
        "nav.pacientes": "Patients",
        "nav.citas": "Appointments",
        "nav.recetas": "Prescriptions",
        "lang.es": "Español",
        "lang.en": "English",
        "lang.fr": "Français",
        "login.title": "Sign in",
        "login.info_registro": "Create an account to access the clinic.",
        "login.user": "Username",
        "login.password": "Password",
        "login.email": "Email",
        "login.nombre": "First name",
        "login.apellidos": "Last name",
        "login.submit": "Sign in",
        "login.create": "Create account",
        "login.to_login": "I already have an account",
        "login.to_register": "Sign up",
        "login.error.required": "Username and password are required.",
        "comun.todos": "All",
        "comun.refrescar": "Refresh",
        "comun.limpiar": "Clear",
        "comun.guardar": "Save",
        "comun.cancelar": "Cancel",
        "comun.editar": "Edit",
        "comun.eliminar": "Delete",
        "comun.reiniciar": "Reset",
        "comun.cargando": "Loading…",
        "comun.contador": "Showing {n} of {total}",
        "col.paciente": "Patient",
        "col.medico": "Doctor",
        "col.hora": "Time",
        "col.fecha": "Date",
        "col.estado": "Status",
        "col.diagnostico": "Diagnosis",
        "col.motivo": "Chief complaint",
        "col.notas": "Notes",
        "col.pago": "Payment",
        "col.importe": "Amount",
        "col.metodo": "Method",
        "col.referencia": "Reference",
        "col.consulta": "Consultation",
        "col.receta": "Prescription",
        "col.medicamentos": "Medications",
        "col.edad": "Age",
        "col.genero": "Gender",
        "col.telefono": "Phone",
        "col.email": "Email",
        "col.num_seguro": "Insurance no.",
        "genero.m": "Male",
        "genero.f": "Female",
        "cita.estado.scheduled": "Scheduled",
        "cita.estado.completed": "Completed",
        "cita.estado.cancelled": "Cancelled",
        "cita.estado.no_show": "No show",
        "pago.estado.pending": "Pending",
        "pago.estado.completed": "Completed",
        "pago.estado.failed": "Failed",
        "pago.estado.refunded": "Refunded",
        "pago.metodo.cash": "Cash",
        "pago.metodo.card": "Card",
        "pago.metodo.insurance": "Insurance",
        "pago.cita.pagado": "Paid",
        "pago.cita.sin_pagar": "Unpaid",
        "dashboard.titulo": "Clinic dashboard",
        "dashboard.kpi.pacientes": "Patients",
        "dashboard.kpi.consultas_hoy": "Consultations today",
        "dashboard.kpi.consultas_total": "{n} in total",
        "dashboard.kpi.citas": "Upcoming appointments",
        "dashboard.kpi.ingresos": "Revenue",
        "dashboard.consultas_hoy": "Today's consultations",
        "dashboard.proximas_citas": "Upcoming appointments",
        "dashboard.estado.terminada": "Done",
        "dashboard.estado.en_curso": "In progress",
        "dashboard.estado.en_espera": "Waiting",
        "dashboard.paciente_desconocido": "Unknown patient",
        "dashboard.diagnostico_en_curso": "Diagnosis in progress",
        "dashboard.consulta_general": "General consultation",
        "pacientes.buscar": "Search by name, phone, email or insurance no.…",
        "pacientes.nuevo": "New patient",
        "pacientes.total": "Total patients: {n}",
        "pacientes.form.nuevo": "New patient",
        "pacientes.form.editar": "Edit patient",
        "pacientes.form.nombre": "First name",
        "pacientes.form.apellidos": "Last name",
        "pacientes.form.genero": "Gender",
        "pacientes.form.fecha_nacimiento": "Date of birth",
        "pacientes.form.telefono": "Phone",
        "pacientes.form.email": "Email",
        "pacientes.form.direccion": "Address",
        "pacientes.form.nacionalidad": "Nationality",
        "pacientes.form.altura": "Height",
        "pacientes.form.peso": "Weight",
        "pacientes.eliminar.titulo": "Delete patient",
        "pacientes.eliminar.confirmar": "Delete {nombre}? This cannot be undone.",
        "pacientes.historia.ver": "Medical record",
        "pacientes.historia.titulo": "Medical record",
        "pacientes.historia.medico": "Responsible doctor",
        "pacientes.historia.antecedentes": "Medical history",
        "pacientes.historia.cronicas": "Chronic conditions",
        "pacientes.historia.familiares": "Family history",
        "pacientes.historia.num_consultas": "Recorded consultations: {n}",
        "pacientes.historia.sin_historia": "This patient has no medical record yet.",
        "pacientes.pagos.titulo": "Payments",
        "pacientes.pagos.resumen": "Paid: {pagado} · Pending: {pendiente} · Last payment: {ultimo}",
        "citas.buscar": "Search patient…",
        "citas.nueva": "New appointment",
        "citas.completar": "Complete",
        "citas.cancelar": "Cancel appointment",
        "citas.cancelar.confirmar": "Cancel the selected appointment?",
        "citas.ausente": "No show",
        "citas.contadores": "Total {total} · Completed {completadas} · Scheduled {programadas} · "
        "Cancelled {canceladas} · Paid {pagadas} · Unpaid {sin_pagar}",
        "citas.form.titulo": "New appointment",
        "citas.form.buscar_paciente": "Type at least 2 letters of the patient…",
        "citas.form.seleccione_medico": "Select a doctor",
        "consultas.buscar": "Search by patient, doctor, complaint or diagnosis…",
        "consultas.nueva": "New consultation",
        "consultas.registrar_pago": "Record payment",
        "consultas.kpi.ingresos_hoy": "Today's revenue",
        "consultas.kpi.pagos_hoy": "Payments today",
        "consultas.kpi.sin_pagar": "Unpaid consultations",
        "consultas.kpi.ingresos_totales": "Total revenue",
        "consultas.form.titulo": "New consultation",
        "consultas.form.sintomas": "Symptoms",
        "consultas.form.observacion": "Observation",
        "consultas.form.pasos": "Recommended steps",
        "consultas.form.elegir_diagnostico": "Choose…",
        "consultas.form.confirmar_reinicio": "Clear every field of the form?",
        "diagnosticos.dialogo.titulo": "Diagnosis",
        "diagnosticos.dialogo.buscar": "Search diagnosis…",
        "diagnosticos.dialogo.nuevo": "New diagnosis",
        "diagnosticos.dialogo.nombre": "Name",
        "diagnosticos.dialogo.descripcion": "Description",
        "diagnosticos.dialogo.cie": "ICD code",
        "diagnosticos.dialogo.crear": "Create and choose",
        "diagnosticos.dialogo.elegir": "Choose",
        "pagos.dialogo.titulo": "Consultation payment",
        "pagos.dialogo.registrar": "Record",
        "pagos.marcar_pagado": "Mark paid",
        "pagos.reembolsar": "Refund",
        "pagos.reembolsar.confirmar": "Refund the payment of this consultation?",
        "pagos.marcar_fallido": "Mark failed",
        "pagos.marcar_fallido.confirmar": "Mark the payment as failed?",
        "recetas.buscar": "Search by prescription id…",
        "recetas.rango": "Between dates",
        "recetas.nueva": "New prescription",
        "recetas.agregar_item": "Add medication",
        "recetas.populares": "Most prescribed medications",
        "recetas.populares.vacio": "No data.",
        "recetas.detalle": "Details",
        "recetas.sin_seleccion": "Select a prescription.",
        "recetas.detalle.consulta": "{paciente} · {medico} {especialidad}\n{fecha}\n{notas}",
        "recetas.item.titulo": "Medication",
        "recetas.item.medicamento": "Medication",
        "recetas.item.dosis": "Dosage",
        "recetas.item.frecuencia": "Frequency",
        "recetas.item.duracion": "Duration",
        "recetas.item.indicacion": "Indication",
    },
    "fr": {
        "app.title": "ClinicPortal",
        "menu.archivo": "Fichier",
        "menu.logout": "Se déconnecter",
        "menu.salir": "Quitter",
        "nav.dashboard": "Tableau de bord",
        "nav.consultas": "Consultations",
        "nav.pacientes": "Patients",
        "nav.citas": "Rendez-vous",
        "nav.recetas": "Ordonnances",
        "lang.es": "Español",
        "lang.en": "English",
        "lang.fr": "Français",
        "login.title": "Connexion",
        "login.info_registro": "Créez un compte pour accéder à la clinique.",
        "login.user": "Nom d'utilisateur",
        "login.password": "Mot de passe",
        "login.email": "Email",
        "login.nombre": "Prénom",
        "login.apellidos": "Nom",
        "login.submit": "Se connecter",
        "login.create": "Créer un compte",
        "login.to_login": "J'ai déjà un compte",
        "login.to_register": "S'inscrire",
        "login.error.required": "Le nom d'utilisateur et le mot de passe sont obligatoires.",
        "comun.todos": "Tous",
        "comun.refrescar": "Actualiser",
        "comun.limpiar": "Effacer",
        "comun.guardar": "Enregistrer",
        "comun.cancelar": "Annuler",
        "comun.editar": "Modifier",
        "comun.eliminar": "Supprimer",
        "comun.reiniciar": "Réinitialiser",
        "comun.cargando": "Chargement…",
        "comun.contador": "{n} sur {total}",
        "col.paciente": "Patient",
        "col.medico": "Médecin",
        "col.hora": "Heure",
        "col.fecha": "Date",
        "col.estado": "Statut",
        "col.diagnostico": "Diagnostic",
        "col.motivo": "Motif",
        "col.notas": "Notes",
        "col.pago": "Paiement",
        "col.importe": "Montant",
        "col.metodo": "Méthode",
        "col.referencia": "Référence",
        "col.consulta": "Consultation",
        "col.receta": "Ordonnance",
        "col.medicamentos": "Médicaments",
        "col.edad": "Âge",
        "col.genero": "Sexe",
        "col.telefono": "Téléphone",
        "col.email": "Email",
        "col.num_seguro": "N° d'assurance",
        "genero.m": "Masculin",
        "genero.f": "Féminin",
        "cita.estado.scheduled": "Programmé",
        "cita.estado.completed": "Terminé",
        "cita.estado.cancelled": "Annulé",
        "cita.estado.no_show": "Absent",
        "pago.estado.pending": "En attente",
        "pago.estado.completed": "Payé",
        "pago.estado.failed": "Échoué",
        "pago.estado.refunded": "Remboursé",
        "pago.metodo.cash": "Espèces",
        "pago.metodo.card": "Carte",
        "pago.metodo.insurance": "Assurance",
        "pago.cita.pagado": "Payé",
        "pago.cita.sin_pagar": "Non payé",
        "dashboard.titulo": "Tableau de bord de la clinique",
        "dashboard.kpi.pacientes": "Patients",
        "dashboard.kpi.consultas_hoy": "Consultations du jour",
        "dashboard.kpi.consultas_total": "{n} au total",
        "dashboard.kpi.citas": "Rendez-vous à venir",
        "dashboard.kpi.ingresos": "Revenus",
        "dashboard.consultas_hoy": "Consultations du jour",
        "dashboard.proximas_citas": "Prochains rendez-vous",
        "dashboard.estado.terminada": "Terminé",
        "dashboard.estado.en_curso": "En cours",
        "dashboard.estado.en_espera": "En attente",
        "dashboard.paciente_desconocido": "Patient inconnu",
        "dashboard.diagnostico_en_curso": "Diagnostic en cours",
        "dashboard.consulta_general": "Consultation générale",
        "pacientes.buscar": "Rechercher par nom, téléphone, email ou n° d'assurance…",
        "pacientes.nuevo": "Nouveau patient",
        "pacientes.total": "Total des patients : {n}",
        "pacientes.form.nuevo": "Nouveau patient",
        "pacientes.form.editar": "Modifier le patient",
        "pacientes.form.nombre": "Prénom",
        "pacientes.form.apellidos": "Nom",
        "pacientes.form.genero": "Sexe",
        "pacientes.form.fecha_nacimiento": "Date de naissance",
        "pacientes.form.telefono": "Téléphone",
        "pacientes.form.email": "Email",
        "pacientes.form.direccion": "Adresse",
        "pacientes.form.nacionalidad": "Nationalité",
        "pacientes.form.altura": "Taille",
        "pacientes.form.peso": "Poids",
        "pacientes.eliminar.titulo": "Supprimer le patient",
        "pacientes.eliminar.confirmar": "Supprimer {nombre} ? Cette action est irréversible.",
        "pacientes.historia.ver": "Dossier médical",
        "pacientes.historia.titulo": "Dossier médical",
        "pacientes.historia.medico": "Médecin responsable",
        "pacientes.historia.antecedentes": "Antécédents",
        "pacientes.historia.cronicas": "Maladies chroniques",
        "pacientes.historia.familiares": "Antécédents familiaux",
        "pacientes.historia.num_consultas": "Consultations enregistrées : {n}",
        "pacientes.historia.sin_historia": "Ce patient n'a pas encore de dossier médical.",
        "pacientes.pagos.titulo": "Paiements",
        "pacientes.pagos.resumen": "Payé : {pagado} · En attente : {pendiente} · Dernier paiement : {ultimo}",
        "citas.buscar": "Rechercher un patient…",
        "citas.nueva": "Nouveau rendez-vous",
        "citas.completar": "Terminer",
        "citas.cancelar": "Annuler le rendez-vous",
        "citas.cancelar.confirmar": "Annuler le rendez-vous sélectionné ?",
        "citas.ausente": "Absent",
        "citas.contadores": "Total {total} · Terminés {completadas} · Programmés {programadas} · "
        "Annulés {canceladas} · Payés {pagadas} · Non payés {sin_pagar}",
        "citas.form.titulo": "Nouveau rendez-vous",
        "citas.form.buscar_paciente": "Tapez au moins 2 lettres du patient…",
        "citas.form.seleccione_medico": "Choisissez un médecin",
        "consultas.buscar": "Rechercher par patient, médecin, motif ou diagnostic…",
        "consultas.nueva": "Nouvelle consultation",
        "consultas.registrar_pago": "Enregistrer un paiement",
        "consultas.kpi.ingresos_hoy": "Revenus du jour",
        "consultas.kpi.pagos_hoy": "Paiements du jour",
        "consultas.kpi.sin_pagar": "Consultations non payées",
        "consultas.kpi.ingresos_totales": "Revenus totaux",
        "consultas.form.titulo": "Nouvelle consultation",
        "consultas.form.sintomas": "Symptômes",
        "consultas.form.observacion": "Observation",
        "consultas.form.pasos": "Étapes recommandées",
        "consultas.form.elegir_diagnostico": "Choisir…",
        "consultas.form.confirmar_reinicio": "Vider tous les champs du formulaire ?",
        "diagnosticos.dialogo.titulo": "Diagnostic",
        "diagnosticos.dialogo.buscar": "Rechercher un diagnostic…",
        "diagnosticos.dialogo.nuevo": "Nouveau diagnostic",
        "diagnosticos.dialogo.nombre": "Nom",
        "diagnosticos.dialogo.descripcion": "Description",
        "diagnosticos.dialogo.cie": "Code CIM",
        "diagnosticos.dialogo.crear": "Créer et choisir",
        "diagnosticos.dialogo.elegir": "Choisir",
        "pagos.dialogo.titulo": "Paiement de la consultation",
        "pagos.dialogo.registrar": "Enregistrer",
        "pagos.marcar_pagado": "Marquer payé",
        "pagos.reembolsar": "Rembourser",
        "pagos.reembolsar.confirmar": "Rembourser le paiement de cette consultation ?",
        "pagos.marcar_fallido": "Marquer échoué",
        "pagos.marcar_fallido.confirmar": "Marquer le paiement comme échoué ?",
        "recetas.buscar": "Rechercher par identifiant d'ordonnance…",
        "recetas.rango": "Entre deux dates",
        "recetas.nueva": "Nouvelle ordonnance",
        "recetas.agregar_item": "Ajouter un médicament",
        "recetas.populares": "Médicaments les plus prescrits",
        "recetas.populares.vacio": "Aucune donnée.",
        "recetas.detalle": "Détail",
        "recetas.sin_seleccion": "Sélectionnez une ordonnance.",
        "recetas.detalle.consulta": "{paciente} · {medico} {especialidad}\n{fecha}\n{notas}",
        "recetas.item.titulo": "Médicament",
        "recetas.item.medicamento": "Médicament",
        "recetas.item.dosis": "Dosage",
        "recetas.item.frecuencia": "Fréquence",
        "recetas.item.duracion": "Durée",
        "recetas.item.indicacion": "Indication",
    },
}
