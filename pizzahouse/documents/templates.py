"""Fixed text blocks shared by the contract and the receipt.

Company details are injected from configuration, not hardcoded.
"""

from pizzahouse.config import BusinessConfig

PAGE_WIDTH = 58
DOUBLE_RULE = "═" * PAGE_WIDTH
SINGLE_RULE = "─" * PAGE_WIDTH
SIGNATURE_LINE = "_" * 33
COLUMN_GAP = " " * 4

CONTRACT_TITLE = "CONTRATO DE PRESTAÇÃO DE SERVIÇOS"
RECEIPT_TITLE = "RECIBO DE ENTRADA"

CLIENT_OBLIGATIONS = """OBRIGAÇÕES DA CONTRATANTE

A CONTRATANTE deverá:
• Fornecer todas as informações necessárias
• Efetuar o pagamento conforme estabelecido
• Disponibilizar local ventilado e tomada 220V"""

PROVIDER_OBLIGATIONS = """OBRIGAÇÕES DA CONTRATADA

A CONTRATADA se compromete a:
• Fornecer rodízio de pizza de alta qualidade
• Disponibilizar pelo menos 1 pizzaiolo e 1 garçom
• Manter funcionários uniformizados
• Preparar quantidade suficiente para até 10% a mais"""

CANCELLATION_POLICY = """CANCELAMENTO

O contrato pode ser rescindido por qualquer parte com
comunicação formal até 10 dias antes do evento, com
devolução da entrada. Cancelamento após pagamento da
entrada: valor será creditado para futura contratação
em até 30 dias."""


def banner(business: BusinessConfig, title: str) -> str:
    return "\n".join([
        DOUBLE_RULE,
        business.name.center(PAGE_WIDTH).rstrip(),
        title.center(PAGE_WIDTH).rstrip(),
        DOUBLE_RULE,
    ])


def company_block(business: BusinessConfig) -> str:
    """The CONTRATADA identification block."""
    return "\n".join([
        f"CONTRATADA: {business.name}",
        f"Endereço: {business.street}",
        f"Bairro: {business.district}, CEP: {business.postal_code}",
        f"{business.city} - {business.state}",
        f"CPF: {business.representative_cpf}",
        f"Responsável: Sr. {business.representative}",
    ])


def two_column_signatures(left: list[str], right: list[str]) -> str:
    """Lay out two signature blocks side by side."""
    width = len(SIGNATURE_LINE)
    lines = [SIGNATURE_LINE + COLUMN_GAP + SIGNATURE_LINE]
    for first, second in zip(left, right):
        lines.append((first.center(width) + COLUMN_GAP + second.center(width)).rstrip())
    return "\n".join(lines)
