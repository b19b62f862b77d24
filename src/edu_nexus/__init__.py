"""
edu_nexus package

Dieses Paket implementiert den Konsolen-Prototyp des EduNexus LMS
(Anmeldung per E-Mail, Rollen, Dashboard, Kurse, Aufgaben, simulierte KI-Werkzeuge).

Schichtenarchitektur:
- domain.py: Entitäten + Enums + Session
- catalog.py: fester Datenbestand
- service.py: Kennzahlen für die Views
- assistants.py: AI Tutor + Lesson Architect (Vorlagen)
- view.py: ASCII-Ausgabe
- controller.py: Anmeldung und Menü-Orchestrierung
- config.py: Einstellungen + Logging
- main.py: Einstiegspunkt
"""
