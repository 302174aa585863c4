"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_TIMEZONE = "America/Sao_Paulo"
DEFAULT_PORT = 3000
DEFAULT_REPLY_DELAY_MS = 1200
DEFAULT_REPLY_TIMEOUT_SECONDS = 10

# Command tokens (already lowercased by the webhook layer)
REPORT_TOKEN = "relatório"
RANGE_SEPARATOR_TOKEN = "até"
LAST_DAYS_TOKEN = "últimos"
YESTERDAY_TOKEN = "ontem"
MOCK_DATA_COMMAND = "gerardadosficticios"

DATE_INPUT_FORMAT = "DD/MM/AAAA"

MOCK_DATA_DAYS = 7

USAGE_HINT = (
    'Comando inválido. Por favor, envie "Entrada", "Saída" ou "Relatório".\n'
    'Exemplos: "relatório", "relatório ontem", "relatório últimos 7 dias", '
    '"relatório 01/06/2025 até 05/06/2025".'
)
EMPTY_REPORT_MESSAGE = "Nenhum registo encontrado para o período solicitado."
NO_HOURS_FOOTER = "Nenhuma hora trabalhada registada no período."
MOCK_DATA_DONE_MESSAGE = '✅ Dados fictícios gerados! Tente "relatório últimos 7 dias" agora.'
