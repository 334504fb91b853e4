# exports/rows.py
"""
Row builders for the downloadable reports.

They read the same documents the dashboard uses and never write anything.
Header labels are the ones the sales team's spreadsheets expect.
"""
from visits.states import STATUS_COMPLETED

VISIT_HEADERS = ['FECHA', 'HORA', 'EJECUTIVO', 'MÉDICO/HOSPITAL', 'ESPECIALIDAD', 'OBJETIVO',
                 'RESULTADO', 'NOTA', 'SEGUIMIENTO', 'ESTADO']

PROCEDURE_HEADERS = ['FECHA', 'HORA', 'HOSPITAL', 'MÉDICO', 'EJECUTIVO', 'PROCEDIMIENTO', 'TÉCNICO',
                     'PAGO', 'COSTO', 'COMISIÓN', 'ESTADO', 'NOTAS']

TIME_OFF_HEADERS = ['EJECUTIVO', 'INICIO', 'FIN', 'DURACIÓN', 'MOTIVO', 'NOTAS']

UNKNOWN_EXECUTIVE = 'DESCONOCIDO'
BACKUP_VERSION = '5.0'


def visit_rows(doctors, period, executive=None):
    for doc in doctors:
        if executive and doc.get('executive') != executive:
            continue
        for v in doc.get('visits') or []:
            if not period.matches(v.get('date')):
                continue
            yield [
                v.get('date') or '',
                v.get('time') or '',
                doc.get('executive') or '',
                doc.get('name') or '',
                doc.get('specialty') or doc.get('category') or '',
                v.get('objective') or '',
                v.get('outcome') or '',
                v.get('note') or '',
                v.get('followUp') or '',
                'REALIZADA' if v.get('status') == STATUS_COMPLETED else 'PLANEADA',
            ]


def procedure_rows(procedures, doctors, period, executive=None):
    owners = {d.get('id'): d.get('executive') for d in doctors}
    for p in procedures:
        owner = owners.get(p.get('doctorId')) or UNKNOWN_EXECUTIVE
        if executive and owner != executive:
            continue
        if not period.matches(p.get('date')):
            continue
        yield [
            p.get('date') or '',
            p.get('time') or '',
            p.get('hospital') or '',
            p.get('doctorName') or '',
            owner,
            p.get('procedureType') or '',
            p.get('technician') or '',
            p.get('paymentType') or '',
            p.get('cost') or 0,
            p.get('commission') or 0,
            'REALIZADO' if p.get('status') == 'performed' else 'PROGRAMADO',
            p.get('notes') or '',
        ]


def time_off_rows(events, executive=None):
    for t in events:
        if executive and t.get('executive') != executive:
            continue
        yield [
            t.get('executive') or '',
            t.get('startDate') or '',
            t.get('endDate') or '',
            t.get('duration') or '',
            t.get('reason') or '',
            t.get('notes') or '',
        ]


def backup(doctors, procedures, time_off, exported_at):
    return {
        'doctors': list(doctors),
        'procedures': list(procedures),
        'timeOff': list(time_off),
        'exportedAt': exported_at.isoformat(),
        'version': BACKUP_VERSION,
    }
