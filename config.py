# -*- coding: utf-8 -*-
"""
Configuração de catálogos do sistema de auditorias LPA.
Todos os cadastros padrão e listas fixas ficam aqui.
"""

CONFIG = {
    # Ordem canônica dos 8 setores; os padrões semanais referenciam estes índices.
    "sector_names": [
        "Brochadeira",      # 0
        "Prensa Ressalto",  # 1
        "Estampa Furo",     # 2
        "Mandrila",         # 3
        "Fresa Canal",      # 4
        "Chanfradeira",     # 5
        "Inspeção Final",   # 6
        "Prensa Curvar",    # 7
    ],

    # Ciclo de 4 semanas: (semana_local - 1) % 4 -> índices de setores, em ordem
    "sector_patterns": {
        0: [0, 5, 1, 6, 2],
        1: [7, 3, 4, 0, 5],
        2: [1, 6, 2, 7, 3],
        3: [4, 0, 5, 1, 6],
    },

    # Tipos de checklist obrigatórios; a ordem define a rotação por auditor
    "checklist_types": [
        "Processo",
        "Qualidade",
        "PCP & Produção",
        "MAN & MC",
        "Gestão de Pessoas",
        "IF",
    ],

    # Setores cadastrados na primeira carga
    "default_sectors": [
        {"id": "sec1", "name": "Brochadeira", "checklist_id": "ck-broch"},
        {"id": "sec2", "name": "Prensa Ressalto", "checklist_id": "ck-prensa"},
        {"id": "sec3", "name": "Estampa Furo", "checklist_id": "ck-estampa"},
        {"id": "sec4", "name": "Mandrila", "checklist_id": "ck-mandrila"},
        {"id": "sec5", "name": "Fresa Canal", "checklist_id": "ck-fresa"},
        {"id": "sec6", "name": "Chanfradeira", "checklist_id": "ck-chanfra"},
        {"id": "sec7", "name": "Inspeção Final", "checklist_id": "ck-inspecao"},
        {"id": "sec8", "name": "Prensa Curvar", "checklist_id": "ck-curvar"},
    ],

    # Auditores fictícios usados quando não há funcionários cadastrados
    "mock_auditors": [
        {"id": "emp-mock-1", "name": "Diego Lima", "role": "Auditor", "sector": "Qualidade"},
        {"id": "emp-mock-2", "name": "Rafael Costa", "role": "Auditor", "sector": "Processo"},
        {"id": "emp-mock-3", "name": "Marlon Oliveira", "role": "Auditor", "sector": "Produção"},
        {"id": "emp-mock-4", "name": "Carlos Henrique", "role": "Auditor", "sector": "Qualidade"},
        {"id": "emp-mock-5", "name": "Aurélio Sousa", "role": "Auditor", "sector": "Qualidade"},
        {"id": "emp-mock-6", "name": "Samuel Mendes", "role": "Auditor", "sector": "Manutenção"},
        {"id": "emp-mock-7", "name": "Ronaldo Freitas", "role": "Auditor", "sector": "Estamparia"},
        {"id": "emp-mock-8", "name": "Mateus Costa", "role": "Auditor", "sector": "Qualidade"},
    ],

    "default_employees": [
        {"id": "emp1", "name": "Carlos Silva", "role": "Operador", "sector": "Produção"},
        {"id": "emp2", "name": "Maria Santos", "role": "Técnico", "sector": "Manutenção"},
        {"id": "emp3", "name": "João Oliveira", "role": "Operador", "sector": "Produção"},
        {"id": "emp4", "name": "Ana Costa", "role": "Supervisor", "sector": "Qualidade"},
        {"id": "emp5", "name": "Pedro Lima", "role": "Operador", "sector": "Produção"},
        {"id": "emp6", "name": "Fernanda Rocha", "role": "Técnico", "sector": "Manutenção"},
        {"id": "emp7", "name": "Roberto Mendes", "role": "Operador", "sector": "Estamparia"},
        {"id": "emp8", "name": "Lucia Ferreira", "role": "Supervisor", "sector": "Qualidade"},
    ],

    "default_machines": [
        {"id": "mach1", "name": "Brochadeira #01", "code": "BRO-001", "sector": "Brochadeira",
         "description": "Máquina brochadeira para furações de precisão", "created_at": "2024-01-15"},
        {"id": "mach2", "name": "Chanfradeira #01", "code": "CHA-001", "sector": "Chanfradeira",
         "description": "Máquina chanfradeira para acabamento de arestas", "created_at": "2024-01-15"},
        {"id": "mach3", "name": "Prensa Ressalto #01", "code": "PRS-001", "sector": "Prensa Ressalto",
         "description": "Prensa para pressão e ressalto", "created_at": "2024-02-01"},
        {"id": "mach4", "name": "Inspeção Final #01", "code": "INS-001", "sector": "Inspeção Final",
         "description": "Máquina de inspeção visual e dimensional final", "created_at": "2024-02-10"},
        {"id": "mach5", "name": "Estampa Furo #01", "code": "EST-001", "sector": "Estampa Furo",
         "description": "Máquina de estamparia para furos", "created_at": "2024-03-01"},
        {"id": "mach6", "name": "Prensa Curvar #01", "code": "PCU-001", "sector": "Prensa Curvar",
         "description": "Prensa para curvagem de peças", "created_at": "2024-03-15"},
        {"id": "mach7", "name": "Mandrila #01", "code": "MAN-001", "sector": "Mandrila",
         "description": "Máquina mandrila para acabamento", "created_at": "2024-03-20"},
        {"id": "mach8", "name": "Fresa Canal #01", "code": "FRE-001", "sector": "Fresa Canal",
         "description": "Máquina fresadora para abertura de canais", "created_at": "2024-04-01"},
    ],

    # Checklists por setor (carga inicial). Perguntas "text" ficam por último.
    "sector_checklists": [
        {"id": "ck-broch", "name": "Auditoria Brochadeira", "category": "Processo", "questions": [
            "Proteções de segurança instaladas?", "Fluido de corte adequado?",
            "Tolerância dimensional conforme?", "Máquina sem ruídos anormais?"]},
        {"id": "ck-prensa", "name": "Auditoria Prensa Ressalto", "category": "Processo", "questions": [
            "Pressão hidráulica correta?", "Cilindros funcionando?",
            "Peças conformes?", "Sensores operacionais?"]},
        {"id": "ck-estampa", "name": "Auditoria Estampa Furo", "category": "Processo", "questions": [
            "Localização dos furos exata?", "Rebarbas dentro do limite?",
            "Diâmetro conforme especificação?", "Ferramenta sem desgaste excessivo?"]},
        {"id": "ck-mandrila", "name": "Auditoria Mandrila", "category": "Processo", "questions": [
            "Mandril centrado corretamente?", "Força de aperto uniforme?",
            "Peça sem defeitos no acabamento?", "Máquina bem lubrificada?"]},
        {"id": "ck-fresa", "name": "Auditoria Fresa Canal", "category": "Processo", "questions": [
            "Profundidade do canal correta?", "Largura do canal dentro da tolerância?",
            "Fresa sem desgaste visível?", "RPM adequado?"]},
        {"id": "ck-chanfra", "name": "Auditoria Chanfradeira", "category": "Processo", "questions": [
            "Ângulo do chanfro conforme?", "Profundidade uniforme?",
            "Sem rebarbas ou defeitos?", "Ferramenta em bom estado?"]},
        {"id": "ck-inspecao", "name": "Auditoria Inspeção Final", "category": "Qualidade", "questions": [
            "Dimensional conforme desenho?", "Acabamento superficial ok?",
            "Sem defeitos monitorados?", "Rótulo/Rastreabilidade ok?"]},
        {"id": "ck-curvar", "name": "Auditoria Prensa Curvar", "category": "Processo", "questions": [
            "Ângulo de curvatura correto?", "Força de curvatura adequada?",
            "Peça sem trincas ou defeitos?", "Matriz/Punção em bom estado?"]},
    ],

    # Rótulos dos dias (1 = segunda)
    "week_days": {
        1: "Segunda",
        2: "Terça",
        3: "Quarta",
        4: "Quinta",
        5: "Sexta",
        6: "Sábado",
    },

    "months": [
        "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
        "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
    ],
}
